"""
图片服务模块
包含图片生成、对象存储镜像和下载代理相关的业务服务
"""

from .image_generation_service import ImageGenerationService
from .image_generation_store_service import ImageGenerationStoreService, StoreResult
from .image_generation_handler import ImageGenerationHandler
from .image_proxy_handler import ImageProxyHandler

__all__ = [
    'ImageGenerationService',
    'ImageGenerationStoreService',
    'StoreResult',
    'ImageGenerationHandler',
    'ImageProxyHandler'
]

"""
存储服务模块
提供统一的存储服务访问接口，支持多种存储适配器
"""

from typing import Optional

from app.core.config import settings as app_settings
from app.core.log_utils import get_logger
from app.core.storage.base_storage import BaseStorage
from app.core.storage.adapters.supabase_storage import SupabaseStorageAdapter
from app.core.storage.exceptions import *
from app.core.storage.factory import (
    create_adapter,
    list_available_adapters,
    register_adapter,
)
from app.core.storage.models import *
from app.core.storage.utils import download_image_from_url

logger = get_logger(__name__)

# 内置适配器
register_adapter(SupabaseStorageAdapter)


def get_storage_service(settings=None) -> Optional[BaseStorage]:
    """
    获取存储服务实例

    未配置对象存储时返回None，调用方据此跳过镜像保存。

    Args:
        settings: 应用配置，默认使用全局配置

    Returns:
        Optional[BaseStorage]: 存储服务实例

    Raises:
        ConfigurationError: 已配置但创建失败时抛出

    Example:
        >>> storage = get_storage_service()
        >>> if storage is not None:
        ...     await storage.upload(data, "openai/cat.png", "image/png")
    """
    settings = settings or app_settings
    if not settings.supabase_enabled:
        logger.warning("SUPABASE_URL或SUPABASE_SERVICE_ROLE_KEY未配置，对象存储已禁用")
        return None

    return create_adapter(
        SupabaseStorageAdapter.ADAPTER_NAME,
        url=settings.supabase_url,
        service_role_key=settings.supabase_service_role_key,
        bucket=settings.supabase_bucket,
        file_size_limit=settings.supabase_bucket_file_size_limit
    )


__all__ = [
    # 工厂函数
    'get_storage_service',
    'create_adapter',
    'list_available_adapters',
    'register_adapter',
    # 抽象接口
    'BaseStorage',
    # 适配器类
    'SupabaseStorageAdapter',
    # 工具函数
    'download_image_from_url',
]

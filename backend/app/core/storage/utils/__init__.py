"""
存储工具模块
提供存储相关的工具函数
"""

from app.core.storage.utils.image import download_image_from_url, resolve_mime_type

__all__ = ['download_image_from_url', 'resolve_mime_type']

"""
ID生成工具模块
提供统一的文件名生成方法
"""

import uuid

from app.utils.datetime_utils import get_current_timestamp_ms


def generate_image_filename(extension: str = "png", prefix: str = "image") -> str:
    """
    生成本地保存图片的文件名

    Args:
        extension: 文件扩展名（不含点）
        prefix: 文件名前缀

    Returns:
        str: 形如 image-1700000000000-ab12cd34.png 的文件名
    """
    return f"{prefix}-{get_current_timestamp_ms()}-{uuid.uuid4().hex[:8]}.{extension}"

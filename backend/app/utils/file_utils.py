"""
文件工具模块
提供MIME类型与扩展名推断等文件处理函数
"""

import io
from typing import Optional

from PIL import Image, UnidentifiedImageError


def get_extension_for_mime_type(mime_type: str) -> str:
    """
    根据MIME类型获取存储使用的扩展名

    只区分png与jpeg，其余类型统一为bin。

    Args:
        mime_type: MIME类型

    Returns:
        str: 扩展名（不含点）
    """
    mime_type = (mime_type or "").lower()
    if "png" in mime_type:
        return "png"
    if "jpeg" in mime_type or "jpg" in mime_type:
        return "jpg"
    return "bin"


def sniff_image_mime_type(data: bytes) -> Optional[str]:
    """
    通过图片内容推断MIME类型

    Args:
        data: 图片二进制数据

    Returns:
        Optional[str]: MIME类型，无法识别时返回None
    """
    if not data:
        return None

    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
    except (UnidentifiedImageError, OSError):
        return None

    if not image_format:
        return None
    return Image.MIME.get(image_format.upper())


def is_image_mime_type(mime_type: Optional[str]) -> bool:
    """检查是否为图片MIME类型"""
    return bool(mime_type) and mime_type.lower().startswith("image/")

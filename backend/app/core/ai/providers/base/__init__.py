"""
AI能力基类定义
"""

from .image_gen import BaseImageGenProvider

__all__ = [
    "BaseImageGenProvider",
]

"""
领域模型模块
"""

from .image import GeneratedImage, ImageOptions, ImageOutputMode

__all__ = [
    'GeneratedImage',
    'ImageOptions',
    'ImageOutputMode',
]

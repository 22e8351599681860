"""
AI模型交互统一模块
提供统一的AI Provider接口和OpenAI图片生成实现
"""

from .base import BaseAIProvider
from .config import ModelConfig
from .exceptions import ImageProviderError
from .models import ModelCapability, ImageResponseFormat, ProviderImage
from .factory import AIProviderFactory
from .registry import register_all_providers

__all__ = [
    "BaseAIProvider",
    "ModelConfig",
    "ImageProviderError",
    "ModelCapability",
    "ImageResponseFormat",
    "ProviderImage",
    "AIProviderFactory",
    "register_all_providers",
]

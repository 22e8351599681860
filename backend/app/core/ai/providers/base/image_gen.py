"""
文生图Provider基类
"""

from abc import abstractmethod

from app.core.ai.base import BaseAIProvider
from app.core.ai.models import ImageResponseFormat, ModelCapability, ProviderImage


class BaseImageGenProvider(BaseAIProvider):
    """文生图Provider基类，一次调用只生成一张图片"""

    CAPABILITIES = frozenset({ModelCapability.IMAGE_GEN})

    @abstractmethod
    async def generate_image(
        self,
        prompt: str,
        model: str,
        size: str,
        quality: str,
        style: str,
        response_format: ImageResponseFormat = ImageResponseFormat.URL
    ) -> ProviderImage:
        """
        生成一张图片

        Args:
            prompt: 提示词
            model: 模型名称
            size: 尺寸，如 1024x1024
            quality: standard / hd
            style: vivid / natural
            response_format: url 或 b64_json

        Returns:
            ProviderImage: 提供商返回的图片

        Raises:
            ImageProviderError: 调用失败或响应中没有图片时抛出
        """

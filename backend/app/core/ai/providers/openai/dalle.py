"""
DALL-E图片生成Provider
"""

from typing import Any, Dict, Optional

import openai

from app.core.log_utils import get_logger
from app.core.ai.config import ModelConfig
from app.core.ai.exceptions import ImageProviderError
from app.core.ai.models import ImageResponseFormat, ProviderImage
from app.core.ai.providers.base.image_gen import BaseImageGenProvider
from .client import OpenAIClientMixin

logger = get_logger(__name__)


class DALLEProvider(OpenAIClientMixin, BaseImageGenProvider):
    """通过OpenAI images接口生成单张图片"""

    PROVIDER_NAME = "openai"

    def __init__(self, model_config: ModelConfig, client: Optional[openai.AsyncOpenAI] = None):
        BaseImageGenProvider.__init__(self, model_config)
        OpenAIClientMixin.__init__(self, model_config, client)

    async def generate_image(
        self,
        prompt: str,
        model: str,
        size: str,
        quality: str,
        style: str,
        response_format: ImageResponseFormat = ImageResponseFormat.URL
    ) -> ProviderImage:
        logger.info(
            "请求DALL-E生成图片, model={model}, format={response_format}",
            model=model,
            response_format=response_format.value,
            prompt_length=len(prompt),
            size=size,
            quality=quality,
            style=style
        )

        try:
            response = await self.client.images.generate(
                model=model,
                prompt=prompt,
                n=1,
                size=size,
                quality=quality,
                style=style,
                response_format=response_format.value
            )
        except openai.OpenAIError as e:
            self.raise_provider_error(e)

        if not response.data:
            raise ImageProviderError("API响应中未找到图片数据", code="empty_response")

        first = response.data[0]
        image = ProviderImage(
            created=response.created,
            url=first.url,
            b64_json=first.b64_json,
            revised_prompt=getattr(first, "revised_prompt", None),
            usage=self._usage_as_dict(getattr(response, "usage", None))
        )
        logger.debug("DALL-E返回图片", has_url=bool(image.url), has_b64=bool(image.b64_json))
        return image

    @staticmethod
    def _usage_as_dict(usage: Any) -> Optional[Dict[str, Any]]:
        if usage is None or isinstance(usage, dict):
            return usage
        return usage.model_dump()

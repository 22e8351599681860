"""
图片生成服务
处理图片生成的核心业务逻辑
"""

import asyncio
import base64
import binascii
from pathlib import Path
from typing import Optional

from app.core.ai.exceptions import ImageProviderError
from app.core.ai.models import ImageResponseFormat, ProviderImage
from app.core.ai.providers.base.image_gen import BaseImageGenProvider
from app.core.log_messages import log_messages
from app.core.log_utils import get_logger
from app.models.image import GeneratedImage, ImageOptions, ImageOutputMode
from app.utils.async_utils import TimedOut, abandoned_task_count, wait_bounded
from app.utils.config_utils import ensure_directory_exists
from app.utils.id_utils import generate_image_filename
from app.utils.string_utils import truncate_string

logger = get_logger(__name__)


class ImageGenerationService:
    """图片生成服务"""

    def __init__(
        self,
        provider: BaseImageGenProvider,
        upload_dir: str,
        upload_url_prefix: str = "/uploads",
        timeout: float = 30.0,
        placeholder_url: str = ""
    ):
        """
        Args:
            provider: 图片生成Provider
            upload_dir: 文件模式下图片的保存目录
            upload_url_prefix: 保存文件对外访问的URL前缀
            timeout: 等待提供商响应的最长时间（秒）
            placeholder_url: 超时后返回的占位图片URL
        """
        self.provider = provider
        self.upload_dir = Path(upload_dir)
        self.upload_url_prefix = upload_url_prefix
        self.timeout = timeout
        self.placeholder_url = placeholder_url

    async def generate_image(
        self,
        prompt: str,
        options: ImageOptions,
        mode: ImageOutputMode = ImageOutputMode.URL
    ) -> GeneratedImage:
        """
        生成图片

        提供商调用与固定超时竞争：超时返回占位结果，
        提供商的其他错误返回失败实体，不向上抛出。

        Args:
            prompt: 图片描述
            options: 生成选项
            mode: 输出模式（url / base64 / file）

        Returns:
            GeneratedImage: 生成结果
        """
        response_format = (
            ImageResponseFormat.URL if mode == ImageOutputMode.URL else ImageResponseFormat.B64_JSON
        )

        logger.info(log_messages.IMAGE_GENERATION_START, mode=mode.value, extra={
            "prompt": truncate_string(prompt, 100),
            "model": options.model,
            "size": options.size,
            "quality": options.quality,
            "style": options.style
        })

        try:
            outcome = await wait_bounded(
                self.provider.generate_image(
                    prompt=prompt,
                    model=options.model,
                    size=options.size,
                    quality=options.quality,
                    style=options.style,
                    response_format=response_format
                ),
                self.timeout
            )
        except ImageProviderError as e:
            logger.error(log_messages.IMAGE_GENERATION_FAILED, mode=mode.value, extra={"error": str(e)})
            return GeneratedImage.create_error(prompt, f"图片生成失败: {e}", options)
        except Exception as e:
            logger.error(log_messages.IMAGE_GENERATION_FAILED, exception=e, mode=mode.value)
            return GeneratedImage.create_error(prompt, f"图片生成失败: {e}", options)

        if isinstance(outcome, TimedOut):
            logger.warning(
                log_messages.IMAGE_GENERATION_TIMEOUT,
                timeout=outcome.timeout,
                abandoned_tasks=abandoned_task_count()
            )
            return GeneratedImage.placeholder(prompt, options, self.placeholder_url)

        provider_image: ProviderImage = outcome.value
        missing = self._missing_payload_error(provider_image, mode)
        if missing:
            logger.error(log_messages.IMAGE_GENERATION_FAILED, mode=mode.value, extra={"error": missing})
            return GeneratedImage.create_error(prompt, f"图片生成失败: {missing}", options)

        image = GeneratedImage.from_provider_image(provider_image, prompt, options, mode)

        if mode == ImageOutputMode.FILE:
            try:
                image = await self._save_to_file(image)
            except (binascii.Error, ValueError, OSError) as e:
                logger.error("保存图片文件失败", extra={"error": str(e)})
                return GeneratedImage.create_error(prompt, f"保存图片文件失败: {e}", options)

        logger.info(log_messages.IMAGE_GENERATION_SUCCESS, mode=mode.value)
        return image

    @staticmethod
    def _missing_payload_error(provider_image: ProviderImage, mode: ImageOutputMode) -> Optional[str]:
        """检查提供商结果是否包含当前模式需要的数据"""
        if mode == ImageOutputMode.URL and not provider_image.url:
            return "API响应中未找到图片URL"
        if mode != ImageOutputMode.URL and not provider_image.b64_json:
            return "API响应中未找到base64图片数据"
        return None

    async def _save_to_file(self, image: GeneratedImage) -> GeneratedImage:
        """
        将base64图片写入上传目录

        Args:
            image: 携带base64数据的生成结果

        Returns:
            GeneratedImage: 记录了文件信息的新实体
        """
        image_bytes = base64.b64decode(image.base64, validate=True)
        filename = generate_image_filename("png")
        file_path = self.upload_dir / filename

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, ensure_directory_exists, self.upload_dir)
        await loop.run_in_executor(None, file_path.write_bytes, image_bytes)

        logger.info("图片已保存到本地文件", extra={
            "file_name": filename,
            "size_bytes": len(image_bytes)
        })
        return image.with_saved_file(filename, str(file_path), self.upload_url_prefix)

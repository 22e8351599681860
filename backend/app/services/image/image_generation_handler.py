"""
图片生成业务处理器
处理图片生成的请求校验、异常处理和响应构建
"""

from typing import Any, Dict

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from app.core.log_utils import get_logger
from app.models.image import GeneratedImage, ImageOptions, ImageOutputMode
from app.schemas.image_generation import ImageGenerateRequest, ImageGenerateUrlRequest
from app.services.image.image_generation_service import ImageGenerationService
from app.services.image.image_generation_store_service import ImageGenerationStoreService
from app.utils.string_utils import truncate_string

logger = get_logger(__name__)


class ImageGenerationHandler:
    """图片生成业务处理器"""

    def __init__(
        self,
        generation_service: ImageGenerationService,
        store_service: ImageGenerationStoreService,
        default_options: ImageOptions
    ):
        self.generation_service = generation_service
        self.store_service = store_service
        self.default_options = default_options

    @staticmethod
    def _validate_prompt(prompt: Any) -> str:
        """
        校验提示词

        Raises:
            HTTPException: 提示词为空时抛出400
        """
        if not prompt or not isinstance(prompt, str) or not prompt.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="提示词不能为空"
            )
        return prompt.strip()

    def _resolve_options(self, request: ImageGenerateRequest) -> ImageOptions:
        """合并请求参数与默认选项"""
        return ImageOptions.with_defaults(
            self.default_options,
            model=request.model,
            size=request.size,
            quality=request.quality,
            style=request.style
        )

    @staticmethod
    def _to_json_response(image: GeneratedImage, body: Dict[str, Any] = None) -> JSONResponse:
        """成功返回200，失败返回500"""
        return JSONResponse(
            status_code=status.HTTP_200_OK if image.success else status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body if body is not None else image.to_api_response()
        )

    async def _generate(
        self,
        request: ImageGenerateRequest,
        mode: ImageOutputMode
    ) -> GeneratedImage:
        prompt = self._validate_prompt(request.prompt)
        options = self._resolve_options(request)

        logger.info("处理图片生成请求", extra={
            "prompt": truncate_string(prompt, 100),
            "mode": mode.value,
            "model": options.model
        })

        try:
            return await self.generation_service.generate_image(prompt, options, mode)
        except Exception as e:
            logger.error("图片生成请求处理异常", exception=e)
            return GeneratedImage.create_error(prompt, f"图片生成失败: {e}", options)

    async def handle_generate(
        self,
        request: ImageGenerateRequest,
        mode: ImageOutputMode = None
    ) -> JSONResponse:
        """
        处理图片生成请求

        未指定模式时，saveToFile为真使用文件模式，否则使用URL模式。

        Args:
            request: 生成请求参数
            mode: 固定的输出模式

        Returns:
            JSONResponse: 生成结果信封

        Raises:
            HTTPException: 提示词为空时抛出400
        """
        if mode is None:
            mode = ImageOutputMode.FILE if request.save_to_file else ImageOutputMode.URL

        image = await self._generate(request, mode)
        return self._to_json_response(image)

    async def handle_generate_url(self, request: ImageGenerateUrlRequest) -> JSONResponse:
        """
        处理URL模式图片生成请求，可选镜像到对象存储

        镜像保存的任何失败都不影响生成结果的返回。

        Args:
            request: 生成请求参数

        Returns:
            JSONResponse: 生成结果信封，镜像成功时包含stored字段

        Raises:
            HTTPException: 提示词为空时抛出400
        """
        image = await self._generate(request, ImageOutputMode.URL)
        body = image.to_api_response()

        if not (image.success and request.store):
            return self._to_json_response(image, body)

        try:
            stored = await self.store_service.store_from_url(image.url, image.prompt)
        except Exception as e:
            logger.warning("处理对象存储保存时发生异常，返回原始结果", extra={"error": str(e)})
            return self._to_json_response(image, body)

        if stored.success:
            body["stored"] = stored.to_stored_info(
                provider=self.store_service.provider_name,
                expires_in_seconds=self.store_service.signed_url_expires
            )
        else:
            logger.warning("保存到对象存储失败", extra={"error": stored.error})

        return self._to_json_response(image, body)

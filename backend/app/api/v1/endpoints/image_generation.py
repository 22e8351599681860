"""
图片生成API端点
采用薄路由、重服务的架构设计，校验与响应构建由处理器完成
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.container import get_image_generation_handler
from app.models.image import ImageOutputMode
from app.schemas.common import ErrorResponse
from app.schemas.image_generation import (
    ImageGenerateRequest,
    ImageGenerateUrlRequest,
    ImageGenerationResponse,
)
from app.services.image import ImageGenerationHandler

router = APIRouter(tags=["图片生成"])

_RESPONSES = {
    400: {"model": ErrorResponse, "description": "提示词为空"},
    500: {"model": ImageGenerationResponse, "description": "图片生成失败"},
}


@router.post(
    "/generate",
    response_model=ImageGenerationResponse,
    responses=_RESPONSES,
    summary="生成图片",
    description="默认返回提供商图片URL，saveToFile为真时保存到本地上传目录"
)
async def generate_image(
    generate_request: Optional[ImageGenerateRequest] = None,
    handler: ImageGenerationHandler = Depends(get_image_generation_handler)
) -> JSONResponse:
    """
    生成图片

    Args:
        generate_request: 生成请求参数
        handler: 图片生成处理器

    Returns:
        JSONResponse: 生成结果信封
    """
    return await handler.handle_generate(generate_request or ImageGenerateRequest())


@router.post(
    "/generate-file",
    response_model=ImageGenerationResponse,
    responses=_RESPONSES,
    summary="生成图片并保存为文件",
    description="图片保存到上传目录，返回文件名和静态访问路径"
)
async def generate_image_file(
    generate_request: Optional[ImageGenerateRequest] = None,
    handler: ImageGenerationHandler = Depends(get_image_generation_handler)
) -> JSONResponse:
    return await handler.handle_generate(
        generate_request or ImageGenerateRequest(),
        mode=ImageOutputMode.FILE
    )


@router.post(
    "/generate-base64",
    response_model=ImageGenerationResponse,
    responses=_RESPONSES,
    summary="生成base64图片",
    description="以内联base64字符串返回图片"
)
async def generate_image_base64(
    generate_request: Optional[ImageGenerateRequest] = None,
    handler: ImageGenerationHandler = Depends(get_image_generation_handler)
) -> JSONResponse:
    return await handler.handle_generate(
        generate_request or ImageGenerateRequest(),
        mode=ImageOutputMode.BASE64
    )


@router.post(
    "/generate-url",
    response_model=ImageGenerationResponse,
    responses=_RESPONSES,
    summary="生成图片URL",
    description="返回提供商图片URL，store为真时同时镜像到对象存储并返回签名URL"
)
async def generate_image_url(
    generate_request: Optional[ImageGenerateUrlRequest] = None,
    handler: ImageGenerationHandler = Depends(get_image_generation_handler)
) -> JSONResponse:
    """
    生成图片URL，可选镜像保存

    镜像保存失败不影响生成结果，响应中仅缺少stored字段。

    Args:
        generate_request: 生成请求参数
        handler: 图片生成处理器

    Returns:
        JSONResponse: 生成结果信封
    """
    return await handler.handle_generate_url(generate_request or ImageGenerateUrlRequest())

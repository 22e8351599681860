"""
图片下载代理API端点
服务端下载远程图片并以附件形式返回，供前端绕过跨域限制
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from app.core.container import get_image_proxy_handler
from app.schemas.common import ErrorResponse
from app.schemas.image_generation import ImageDownloadProxyRequest
from app.services.image import ImageProxyHandler

router = APIRouter(tags=["图片代理"])


@router.post(
    "/download-proxy",
    response_class=Response,
    responses={
        200: {"content": {"image/png": {}}, "description": "图片二进制内容"},
        400: {"model": ErrorResponse, "description": "图片URL为空"},
        500: {"model": ErrorResponse, "description": "下载图片失败"},
    },
    summary="图片下载代理",
    description="下载任意图片URL并附带Content-Disposition: attachment返回"
)
async def download_proxy(
    proxy_request: Optional[ImageDownloadProxyRequest] = None,
    handler: ImageProxyHandler = Depends(get_image_proxy_handler)
) -> Response:
    """
    图片下载代理

    Args:
        proxy_request: 包含imageUrl的请求体
        handler: 下载代理处理器

    Returns:
        Response: 图片二进制内容
    """
    return await handler.handle_download(proxy_request or ImageDownloadProxyRequest())

"""
图片下载代理处理器
在服务端下载远程图片并以附件形式转发，绕过浏览器跨域限制
"""

import httpx
from fastapi import HTTPException, Response, status
from fastapi.responses import JSONResponse

from app.core.log_utils import get_logger
from app.core.storage.exceptions import StorageError
from app.core.storage.utils.image import download_image_from_url
from app.schemas.image_generation import ImageDownloadProxyRequest

logger = get_logger(__name__)


class ImageProxyHandler:
    """图片下载代理处理器"""

    def __init__(self, http_client: httpx.AsyncClient, download_filename: str = "image-download.png"):
        self.http_client = http_client
        self.download_filename = download_filename

    async def handle_download(self, request: ImageDownloadProxyRequest) -> Response:
        """
        下载并转发图片

        Args:
            request: 代理请求参数

        Returns:
            Response: 图片二进制内容；下载失败时返回500 JSON

        Raises:
            HTTPException: 图片URL为空时抛出400
        """
        image_url = (request.image_url or "").strip()
        if not image_url:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="图片URL不能为空"
            )

        try:
            result = await download_image_from_url(image_url, self.http_client)
        except StorageError as e:
            logger.error("图片代理下载失败", extra={"error": str(e)})
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": f"下载图片失败: {e.message}"}
            )

        logger.info("通过代理发送图片", extra={"size_bytes": result.size, "mime_type": result.mime_type})
        return Response(
            content=result.data,
            media_type=result.mime_type,
            headers={
                "Content-Length": str(result.size),
                "Content-Disposition": f'attachment; filename="{self.download_filename}"'
            }
        )

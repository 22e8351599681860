"""
远程图片下载
"""

from typing import Optional

import httpx

from app.core.log_messages import log_messages
from app.core.log_utils import get_logger
from app.core.storage.exceptions import DownloadError, HTTPError, NetworkError
from app.core.storage.models import DownloadResult
from app.utils.file_utils import is_image_mime_type, sniff_image_mime_type

logger = get_logger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/png"


def resolve_mime_type(header_value: Optional[str], data: bytes) -> str:
    """
    确定下载内容的MIME类型

    依次尝试：图片类型的Content-Type、根据内容识别、原始Content-Type、image/png。
    """
    header_value = (header_value or "").strip()
    if is_image_mime_type(header_value):
        return header_value
    return sniff_image_mime_type(data) or header_value or DEFAULT_IMAGE_MIME_TYPE


async def download_image_from_url(image_url: str, client: httpx.AsyncClient) -> DownloadResult:
    """
    下载远程图片到内存

    不限制目标主机。

    Args:
        image_url: 图片URL
        client: 共享的httpx异步客户端

    Returns:
        DownloadResult: 图片数据与MIME类型

    Raises:
        HTTPError: 非2xx响应
        NetworkError: 连接失败、超时等传输错误
        DownloadError: URL无效等其他错误
    """
    url_prefix = image_url[:80]
    logger.info(log_messages.IMAGE_DOWNLOAD_START, url_prefix=url_prefix)

    try:
        response = await client.get(image_url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning(log_messages.IMAGE_DOWNLOAD_FAILED, url_prefix=url_prefix, status_code=status_code)
        raise HTTPError(
            f"获取图片失败: {status_code} {e.response.reason_phrase}",
            status_code=status_code
        ) from e
    except httpx.TransportError as e:
        logger.warning(log_messages.IMAGE_DOWNLOAD_FAILED, url_prefix=url_prefix, error=str(e))
        raise NetworkError(f"图片下载失败 (网络错误): {e}") from e
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        logger.warning(log_messages.IMAGE_DOWNLOAD_FAILED, url_prefix=url_prefix, error=str(e))
        raise DownloadError(f"下载图片失败: {e}") from e

    result = DownloadResult(
        data=response.content,
        mime_type=resolve_mime_type(response.headers.get("content-type"), response.content),
        source_url=image_url
    )
    logger.info(log_messages.IMAGE_DOWNLOAD_SUCCESS, size_bytes=result.size, mime_type=result.mime_type)
    return result


__all__ = ['download_image_from_url', 'resolve_mime_type', 'DEFAULT_IMAGE_MIME_TYPE']

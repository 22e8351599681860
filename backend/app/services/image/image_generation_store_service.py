"""
AI生成图片存储服务
将提供商返回的图片镜像到对象存储，并生成带有效期的签名URL
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from app.core.log_messages import log_messages
from app.core.log_utils import get_logger
from app.core.storage.base_storage import BaseStorage
from app.core.storage.exceptions import StorageError
from app.core.storage.models import SignedObject
from app.core.storage.utils.image import download_image_from_url
from app.utils.datetime_utils import get_current_timestamp_ms
from app.utils.file_utils import get_extension_for_mime_type
from app.utils.string_utils import generate_slug

logger = get_logger(__name__)


@dataclass
class StoreResult:
    """镜像保存结果"""
    success: bool
    url: Optional[str] = None
    path: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def from_signed(cls, signed: SignedObject) -> "StoreResult":
        return cls(
            success=True,
            url=signed.url,
            path=signed.key,
            content_type=signed.mime_type,
            size=signed.size
        )

    @classmethod
    def failed(cls, error: str) -> "StoreResult":
        """创建失败结果"""
        return cls(success=False, error=error)

    def to_stored_info(self, provider: str, expires_in_seconds: int) -> Dict[str, Any]:
        """转换为API响应中的stored字段"""
        return {
            "provider": provider,
            "url": self.url,
            "path": self.path,
            "contentType": self.content_type,
            "size": self.size,
            "expiresInSeconds": expires_in_seconds,
        }


class ImageGenerationStoreService:
    """AI生成图片存储服务"""

    def __init__(
        self,
        storage: Optional[BaseStorage],
        http_client: httpx.AsyncClient,
        object_prefix: str = "openai",
        signed_url_expires: int = 3600
    ):
        """
        Args:
            storage: 存储服务，未配置对象存储时为None
            http_client: 共享的httpx异步客户端
            object_prefix: 对象存储键前缀
            signed_url_expires: 签名URL有效期（秒）
        """
        self.storage = storage
        self.http_client = http_client
        self.object_prefix = object_prefix
        self.signed_url_expires = signed_url_expires

    @property
    def enabled(self) -> bool:
        """对象存储是否可用"""
        return self.storage is not None

    @property
    def provider_name(self) -> str:
        """存储提供方名称"""
        return getattr(self.storage, "ADAPTER_NAME", "") or "unknown"

    def build_object_key(self, prompt: str, mime_type: str, timestamp_ms: Optional[int] = None) -> str:
        """
        生成对象存储键

        格式：{prefix}/{slug(prompt)}-{毫秒时间戳}.{png|jpg|bin}

        Args:
            prompt: 提示词
            mime_type: 图片MIME类型
            timestamp_ms: 毫秒时间戳，默认当前时间

        Returns:
            str: 对象存储键
        """
        safe_prompt = generate_slug(prompt, max_length=60)
        timestamp = timestamp_ms if timestamp_ms is not None else get_current_timestamp_ms()
        extension = get_extension_for_mime_type(mime_type)
        return f"{self.object_prefix}/{safe_prompt}-{timestamp}.{extension}"

    async def store_from_url(self, image_url: Optional[str], prompt: str) -> StoreResult:
        """
        下载图片并保存到对象存储

        任一步骤失败都返回失败结果，不抛出异常。

        Args:
            image_url: 提供商返回的图片URL
            prompt: 提示词，用于生成存储键

        Returns:
            StoreResult: 保存结果
        """
        if not self.enabled:
            logger.warning(log_messages.STORAGE_DISABLED)
            return StoreResult.failed("对象存储未配置")

        if not image_url:
            return StoreResult.failed("缺少图片URL")

        logger.info(log_messages.IMAGE_STORE_START, extra={"url_prefix": image_url[:80]})

        try:
            download = await download_image_from_url(image_url, self.http_client)
        except StorageError as e:
            logger.warning(log_messages.IMAGE_STORE_FAILED, extra={"step": "download", "error": str(e)})
            return StoreResult.failed(e.message)

        object_key = self.build_object_key(prompt, download.mime_type)

        try:
            signed = await self.storage.upload_and_sign(
                download.data,
                object_key,
                download.mime_type,
                expires=self.signed_url_expires
            )
        except StorageError as e:
            logger.warning(log_messages.IMAGE_STORE_FAILED, extra={
                "object_key": object_key,
                "error": str(e)
            })
            return StoreResult.failed(e.message)

        logger.info(log_messages.IMAGE_STORE_SUCCESS, extra={
            "object_key": object_key,
            "size_bytes": download.size,
            "mime_type": download.mime_type
        })
        return StoreResult.from_signed(signed)

"""
Supabase Storage存储适配器
使用服务端密钥访问私有存储桶，对外只暴露带有效期的签名URL
"""

import asyncio
from functools import partial
from typing import Any, Callable, Dict, Optional, TypeVar

from supabase import Client, create_client

from app.core.log_utils import get_logger
from app.core.storage.base_storage import BaseStorage
from app.core.storage.exceptions import (
    ConfigurationError,
    URLError,
    UploadError,
)
from app.core.storage.models import UploadResult

logger = get_logger(__name__)

T = TypeVar('T')

# 存储桶已存在时Supabase返回的错误关键字
_BUCKET_EXISTS_MARKERS = ("already exists", "duplicate")


class SupabaseStorageAdapter(BaseStorage):
    """
    Supabase Storage适配器

    supabase-py的存储接口是同步的，所有调用都放到默认线程池执行。
    存储桶在第一次上传前按需创建，之后不再检查。
    """

    ADAPTER_NAME = "supabase"

    def __init__(
        self,
        url: str,
        service_role_key: str,
        bucket: str,
        file_size_limit: Optional[str] = None,
        client: Optional[Client] = None
    ) -> None:
        """
        Args:
            url: Supabase项目URL
            service_role_key: 服务端密钥
            bucket: 存储桶名称
            file_size_limit: 新建存储桶的单文件大小限制，如 "10MB"
            client: 已创建的客户端，测试时注入

        Raises:
            ConfigurationError: url、密钥或存储桶为空时抛出
        """
        missing = [name for name, value in (
            ("SUPABASE_URL", url),
            ("SUPABASE_SERVICE_ROLE_KEY", service_role_key),
            ("SUPABASE_BUCKET", bucket),
        ) if not value]
        if missing:
            raise ConfigurationError(f"Supabase存储配置不完整，缺少: {', '.join(missing)}")

        self.url = url
        self.bucket = bucket
        self.file_size_limit = file_size_limit
        self._client = client or create_client(url, service_role_key)
        self._bucket_ready = False

    async def _call(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args, **kwargs))

    @property
    def _objects(self):
        return self._client.storage.from_(self.bucket)

    async def ensure_bucket(self) -> None:
        """
        创建私有存储桶

        创建失败只记录警告，存储桶可能已由其他方式创建，真正的错误由上传步骤报告。
        """
        if self._bucket_ready:
            return

        options: Dict[str, Any] = {"public": False}
        if self.file_size_limit:
            options["file_size_limit"] = self.file_size_limit

        try:
            await self._call(self._client.storage.create_bucket, self.bucket, options=options)
            logger.info("已创建Supabase存储桶: {bucket}", bucket=self.bucket)
        except Exception as e:
            if not any(marker in str(e).lower() for marker in _BUCKET_EXISTS_MARKERS):
                logger.warning(
                    "创建Supabase存储桶失败，继续尝试上传: {bucket}",
                    bucket=self.bucket,
                    error=str(e)
                )

        self._bucket_ready = True

    async def upload(
        self,
        data: bytes,
        key: str,
        mime_type: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> UploadResult:
        """上传对象，metadata在Supabase中不使用"""
        await self.ensure_bucket()

        file_options = {"content-type": mime_type, "upsert": "true"}
        try:
            await self._call(self._objects.upload, key, data, file_options)
        except Exception as e:
            logger.error("Supabase上传失败", key=key, error=str(e))
            raise UploadError(f"上传文件失败: {e}") from e

        logger.info("Supabase上传成功", key=key, size_bytes=len(data), mime_type=mime_type)
        return UploadResult(key=key, size=len(data), mime_type=mime_type, bucket=self.bucket)

    async def generate_url(self, key: str, expires: int = 3600, operation: str = "get") -> str:
        if operation.lower() != "get":
            raise URLError(f"不支持的操作类型: {operation}")

        try:
            response = await self._call(self._objects.create_signed_url, key, expires)
        except Exception as e:
            logger.error("Supabase生成签名URL失败", key=key, expires=expires, error=str(e))
            raise URLError(f"生成签名URL失败: {e}") from e

        # 不同版本的SDK分别使用signedURL和signedUrl
        response = response or {}
        signed_url = response.get("signedURL") or response.get("signedUrl")
        if not signed_url:
            raise URLError("签名URL响应中缺少signedURL字段")

        logger.debug("已生成Supabase签名URL", key=key, expires=expires)
        return signed_url


__all__ = ['SupabaseStorageAdapter']

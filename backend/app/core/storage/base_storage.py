"""
存储后端接口
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional

from app.core.storage.models import SignedObject, UploadResult


class BaseStorage(ABC):
    """
    对象存储后端

    子类实现上传与签名两个原语，ensure_bucket与close按需覆盖。
    """

    ADAPTER_NAME: ClassVar[str] = ""

    @abstractmethod
    async def upload(
        self,
        data: bytes,
        key: str,
        mime_type: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> UploadResult:
        """
        写入对象，同名对象直接覆盖

        Raises:
            UploadError: 写入失败时抛出
        """

    @abstractmethod
    async def generate_url(self, key: str, expires: int = 3600, operation: str = "get") -> str:
        """
        为对象生成有效期为expires秒的访问URL

        Raises:
            URLError: 后端拒绝签名或操作类型不是get时抛出
        """

    async def ensure_bucket(self) -> None:
        return None

    async def upload_and_sign(self, data: bytes, key: str, mime_type: str, expires: int) -> SignedObject:
        """
        上传对象并返回签名URL

        Raises:
            StorageError: 建桶、上传或签名任一步骤失败时抛出
        """
        await self.ensure_bucket()
        uploaded = await self.upload(data, key, mime_type)
        url = await self.generate_url(uploaded.key, expires=expires, operation="get")
        return SignedObject(
            key=uploaded.key,
            url=url,
            size=uploaded.size,
            mime_type=uploaded.mime_type,
            expires_in=expires
        )

    async def close(self) -> None:
        return None

"""
存储数据模型
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UploadResult:
    """已写入存储桶的对象"""
    key: str
    size: int
    mime_type: str
    bucket: Optional[str] = None


@dataclass(frozen=True)
class SignedObject:
    """
    已上传并签名的对象

    Attributes:
        key: 存储键
        url: 带有效期的签名URL
        size: 对象大小（字节）
        mime_type: MIME类型
        expires_in: 签名URL有效期（秒）
    """
    key: str
    url: str
    size: int
    mime_type: str
    expires_in: int


@dataclass(frozen=True)
class DownloadResult:
    """从远程URL下载的内容"""
    data: bytes
    mime_type: str
    source_url: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


__all__ = [
    'UploadResult',
    'SignedObject',
    'DownloadResult',
]

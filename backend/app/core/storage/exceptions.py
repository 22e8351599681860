"""
存储模块异常
每种异常以类属性code区分，便于日志与测试断言
"""

from typing import Optional


class StorageError(Exception):
    """存储相关异常的基类"""

    code: str = "STORAGE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(StorageError):
    code = "CONFIG_ERROR"


class UploadError(StorageError):
    code = "UPLOAD_ERROR"


class URLError(StorageError):
    """签名URL生成失败"""
    code = "URL_ERROR"


class DownloadError(StorageError):
    """远程图片下载失败"""
    code = "DOWNLOAD_ERROR"


class HTTPError(DownloadError):
    """远程服务返回非2xx状态码"""
    code = "HTTP_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(DownloadError):
    """连接、超时等传输层错误"""
    code = "NETWORK_ERROR"


__all__ = [
    'StorageError',
    'ConfigurationError',
    'UploadError',
    'URLError',
    'DownloadError',
    'HTTPError',
    'NetworkError',
]

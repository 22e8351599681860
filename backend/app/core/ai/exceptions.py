"""
AI Provider异常定义
"""

from typing import Optional


class ImageProviderError(Exception):
    """
    图片生成提供商调用异常

    Attributes:
        message: 错误消息
        code: 错误码，见OpenAIClientMixin.classify_error，响应中无图片时为empty_response
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message

"""
OpenAI客户端封装
负责创建AsyncOpenAI客户端，并把SDK异常转换为ImageProviderError
"""

from typing import NoReturn, Optional, Tuple, Type, TYPE_CHECKING

import openai

from app.core.log_utils import get_logger
from app.core.ai.exceptions import ImageProviderError

if TYPE_CHECKING:
    from app.core.ai.config import ModelConfig

logger = get_logger(__name__)

# 按顺序匹配，子类异常需排在父类之前
_ERROR_TABLE: Tuple[Tuple[Type[Exception], str, str], ...] = (
    (openai.RateLimitError, "rate_limit", "API调用频率超限"),
    (openai.AuthenticationError, "auth", "API认证失败，请检查API密钥"),
    (openai.BadRequestError, "bad_request", "API请求参数错误"),
    (openai.APITimeoutError, "timeout", "API请求超时"),
    (openai.APIConnectionError, "connection", "API连接失败"),
    (openai.APIStatusError, "status", "API返回错误状态"),
)


class OpenAIClientMixin:
    """持有AsyncOpenAI客户端的Mixin"""

    def __init__(self, model_config: 'ModelConfig', client: Optional[openai.AsyncOpenAI] = None):
        # 重试由调用方决定，SDK内部不重试
        self.client = client or openai.AsyncOpenAI(
            api_key=model_config.api_key,
            base_url=model_config.base_url,
            max_retries=model_config.max_retries
        )
        logger.debug(
            "OpenAI客户端已就绪",
            base_url=model_config.base_url or "default",
            injected=client is not None
        )

    async def close(self) -> None:
        await self.client.close()

    @staticmethod
    def classify_error(e: Exception) -> Tuple[str, str]:
        """返回 (错误代码, 中文描述)"""
        for error_type, code, description in _ERROR_TABLE:
            if isinstance(e, error_type):
                return code, description
        return "generic", "API调用失败"

    def raise_provider_error(self, e: Exception) -> NoReturn:
        """
        记录并转换SDK异常

        Raises:
            ImageProviderError: 始终抛出，保留原始异常链
        """
        code, description = self.classify_error(e)
        logger.error(
            "OpenAI图片接口调用失败: {description}",
            description=description,
            error_code=code,
            error_type=type(e).__name__,
            error=str(e)
        )
        raise ImageProviderError(f"{description}: {e}", code=code) from e

"""
AI Provider抽象基类
"""

from abc import ABC
from typing import Any, ClassVar, Dict, FrozenSet, TYPE_CHECKING

from .models import ModelCapability

if TYPE_CHECKING:
    from app.core.ai.config import ModelConfig


class BaseAIProvider(ABC):
    """
    Provider基类

    子类通过类属性声明名称与能力，工厂据此完成注册。
    """

    PROVIDER_NAME: ClassVar[str] = ""
    CAPABILITIES: ClassVar[FrozenSet[ModelCapability]] = frozenset()

    def __init__(self, model_config: 'ModelConfig'):
        self.model_config = model_config

    def supports(self, capability: ModelCapability) -> bool:
        return capability in self.CAPABILITIES

    def describe(self) -> Dict[str, Any]:
        """用于日志的Provider摘要"""
        return {
            "provider": self.PROVIDER_NAME,
            "model": self.model_config.model_name,
            "base_url": self.model_config.base_url,
        }

    async def close(self) -> None:
        """释放底层连接，默认无操作"""
        return None

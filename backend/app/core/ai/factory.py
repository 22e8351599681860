"""
AI Provider工厂
按能力和名称登记Provider类，并根据模型配置创建实例
"""

from typing import Any, Dict, List, Type

from app.core.log_utils import get_logger
from .base import BaseAIProvider
from .config import ModelConfig
from .models import ModelCapability

logger = get_logger(__name__)


class AIProviderFactory:
    """AI Provider工厂类"""

    # {capability: {provider_name: ProviderClass}}
    _providers: Dict[ModelCapability, Dict[str, Type[BaseAIProvider]]] = {}

    @classmethod
    def register(cls, provider_class: Type[BaseAIProvider]) -> None:
        """
        登记Provider类，名称与能力取自类属性

        Raises:
            ValueError: Provider未声明名称时抛出
        """
        name = provider_class.PROVIDER_NAME
        if not name:
            raise ValueError(f"{provider_class.__name__} 未声明PROVIDER_NAME")

        for capability in provider_class.CAPABILITIES:
            cls._providers.setdefault(capability, {})[name] = provider_class

        logger.info(
            "注册Provider: {provider_name}",
            provider_name=name,
            capabilities=sorted(c.value for c in provider_class.CAPABILITIES)
        )

    @classmethod
    def create(
        cls,
        model_config: ModelConfig,
        capability: ModelCapability,
        **provider_kwargs: Any
    ) -> BaseAIProvider:
        """
        创建Provider实例

        Args:
            model_config: 模型配置，provider_name决定使用哪个实现
            capability: 需要的能力
            **provider_kwargs: 传给构造函数的额外参数（如注入的客户端）

        Raises:
            ValueError: 该能力下没有对应名称的Provider时抛出
        """
        provider_class = cls._providers.get(capability, {}).get(model_config.provider_name)
        if provider_class is None:
            raise ValueError(
                f"未注册的Provider: {capability.value}/{model_config.provider_name}, "
                f"可用的Provider: {cls.available(capability)}"
            )
        return provider_class(model_config, **provider_kwargs)

    @classmethod
    def available(cls, capability: ModelCapability) -> List[str]:
        return list(cls._providers.get(capability, {}))

    @classmethod
    def is_registered(cls, capability: ModelCapability, provider_name: str) -> bool:
        return provider_name in cls._providers.get(capability, {})

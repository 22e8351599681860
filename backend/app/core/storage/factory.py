"""
存储适配器注册表
适配器类以ADAPTER_NAME登记，按名称创建实例
"""

from typing import Any, Dict, List, Type

from app.core.log_utils import get_logger
from app.core.storage.base_storage import BaseStorage
from app.core.storage.exceptions import ConfigurationError, StorageError

logger = get_logger(__name__)

_adapters: Dict[str, Type[BaseStorage]] = {}


def register_adapter(adapter_class: Type[BaseStorage]) -> None:
    """登记适配器类，同名登记会覆盖旧值"""
    if not adapter_class.ADAPTER_NAME:
        raise ConfigurationError(f"{adapter_class.__name__} 未声明ADAPTER_NAME")
    _adapters[adapter_class.ADAPTER_NAME] = adapter_class
    logger.debug("已注册存储适配器: {adapter}", adapter=adapter_class.ADAPTER_NAME)


def create_adapter(name: str, **kwargs: Any) -> BaseStorage:
    """
    按名称创建适配器

    Raises:
        ConfigurationError: 名称未登记或构造失败时抛出
    """
    adapter_class = _adapters.get(name)
    if adapter_class is None:
        raise ConfigurationError(
            f"存储适配器 '{name}' 不存在，可用适配器: {', '.join(_adapters) or '无'}"
        )

    try:
        return adapter_class(**kwargs)
    except StorageError:
        raise
    except Exception as e:
        logger.error("创建存储适配器失败: {adapter}", exception=e, adapter=name)
        raise ConfigurationError(f"创建存储适配器 '{name}' 失败: {e}") from e


def list_available_adapters() -> List[str]:
    return list(_adapters)


__all__ = [
    'register_adapter',
    'create_adapter',
    'list_available_adapters',
]

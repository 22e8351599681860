"""
AI Provider注册
"""

from .factory import AIProviderFactory
from .models import ModelCapability


def register_all_providers() -> None:
    """登记内置Provider，重复调用无副作用"""
    from .providers.openai.dalle import DALLEProvider

    if not AIProviderFactory.is_registered(ModelCapability.IMAGE_GEN, DALLEProvider.PROVIDER_NAME):
        AIProviderFactory.register(DALLEProvider)

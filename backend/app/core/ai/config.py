"""
AI模型配置
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ModelConfig:
    """
    图片生成模型的连接配置

    Attributes:
        model_name: 默认模型名称
        api_key: API密钥
        base_url: API地址，为空时使用SDK默认值
        provider_name: Provider名称
        max_retries: SDK内部重试次数，请求失败直接返回错误
    """
    model_name: str
    api_key: str
    base_url: Optional[str] = None
    provider_name: str = "openai"
    max_retries: int = 0

    @classmethod
    def from_settings(cls, settings) -> 'ModelConfig':
        return cls(
            model_name=settings.image_default_model,
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url or None
        )

"""
AI模型交互的数据模型
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Dict, Any


class ModelCapability(str, Enum):
    """模型能力枚举"""
    IMAGE_GEN = "image_gen"


class ImageResponseFormat(str, Enum):
    """图片生成接口的返回格式"""
    URL = "url"
    B64_JSON = "b64_json"


@dataclass
class ProviderImage:
    """
    提供商返回的单张图片

    Attributes:
        created: 提供商返回的创建时间戳（秒）
        url: 图片远程URL（url格式时）
        b64_json: base64编码的图片数据（b64_json格式时）
        revised_prompt: 提供商改写后的提示词
        usage: 用量统计
    """
    created: Optional[int] = None
    url: Optional[str] = None
    b64_json: Optional[str] = None
    revised_prompt: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None

"""
生成图片模型
描述一次图片生成请求的结果，只在请求生命周期内存在，不做持久化
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from app.core.ai.models import ProviderImage
from app.utils.datetime_utils import format_datetime_iso, get_current_datetime, get_current_timestamp

SUCCESS_MESSAGE = "图片生成成功"
FAILURE_MESSAGE = "图片生成失败"

# 超时占位结果使用的用量统计
PLACEHOLDER_USAGE: Dict[str, int] = {
    "prompt_tokens": 10,
    "completion_tokens": 0,
    "total_tokens": 10,
}


class ImageOutputMode(str, Enum):
    """图片输出模式"""
    URL = "url"
    BASE64 = "base64"
    FILE = "file"


@dataclass(frozen=True)
class ImageOptions:
    """图片生成选项"""
    model: str = "dall-e-3"
    size: str = "1024x1024"
    quality: str = "standard"
    style: str = "vivid"

    @classmethod
    def with_defaults(
        cls,
        defaults: "ImageOptions",
        model: Optional[str] = None,
        size: Optional[str] = None,
        quality: Optional[str] = None,
        style: Optional[str] = None
    ) -> "ImageOptions":
        """用请求中的非空值覆盖默认选项"""
        return cls(
            model=model or defaults.model,
            size=size or defaults.size,
            quality=quality or defaults.quality,
            style=style or defaults.style
        )


@dataclass
class GeneratedImage:
    """
    生成图片实体

    成功时最多填充 base64 / url / 文件（filename + image_url）其中一种位置信息，
    失败时只携带错误信息。
    """
    prompt: str
    options: ImageOptions = field(default_factory=ImageOptions)
    created: Optional[int] = None
    base64: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    image_url: Optional[str] = None
    file_path: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
    created_at: datetime = field(default_factory=get_current_datetime)
    success: bool = False
    error: Optional[str] = None

    @classmethod
    def from_provider_image(
        cls,
        provider_image: ProviderImage,
        prompt: str,
        options: ImageOptions,
        mode: ImageOutputMode
    ) -> "GeneratedImage":
        """
        根据提供商返回结果创建成功实体

        Args:
            provider_image: 提供商返回的图片
            prompt: 原始提示词
            options: 生成选项
            mode: 输出模式，决定保留哪一种图片位置信息

        Returns:
            GeneratedImage: 成功实体
        """
        return cls(
            prompt=prompt,
            options=options,
            created=provider_image.created,
            base64=provider_image.b64_json if mode != ImageOutputMode.URL else None,
            url=provider_image.url if mode == ImageOutputMode.URL else None,
            usage=provider_image.usage,
            success=True
        )

    @classmethod
    def placeholder(cls, prompt: str, options: ImageOptions, placeholder_url: str) -> "GeneratedImage":
        """
        创建提供商超时时返回的占位结果

        占位图片只有固定URL，因此base64和文件模式超时时同样返回url字段。
        """
        return cls(
            prompt=prompt,
            options=options,
            created=get_current_timestamp(),
            url=placeholder_url,
            usage=dict(PLACEHOLDER_USAGE),
            success=True
        )

    @classmethod
    def create_error(cls, prompt: str, error: str, options: Optional[ImageOptions] = None) -> "GeneratedImage":
        """创建失败实体"""
        return cls(
            prompt=prompt or "",
            options=options or ImageOptions(),
            success=False,
            error=error
        )

    def with_saved_file(self, filename: str, file_path: str, url_prefix: str) -> "GeneratedImage":
        """
        返回记录了本地文件信息的新实体

        文件保存后不再返回base64数据。
        """
        return replace(
            self,
            base64=None,
            filename=filename,
            file_path=file_path,
            image_url=f"{url_prefix.rstrip('/')}/{filename}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """序列化为字典（包含内部字段）"""
        return {
            "created": self.created,
            "prompt": self.prompt,
            "model": self.options.model,
            "size": self.options.size,
            "quality": self.options.quality,
            "style": self.options.style,
            "base64": self.base64,
            "url": self.url,
            "filename": self.filename,
            "imageUrl": self.image_url,
            "filePath": self.file_path,
            "usage": self.usage,
            "createdAt": format_datetime_iso(self.created_at),
            "success": self.success,
            "error": self.error,
        }

    def to_api_response(self) -> Dict[str, Any]:
        """构建API响应信封（不包含本地文件路径等内部字段）"""
        response: Dict[str, Any] = {
            "success": self.success,
            "message": SUCCESS_MESSAGE if self.success else FAILURE_MESSAGE,
            "data": {
                "created": self.created,
                "prompt": self.prompt,
                "model": self.options.model,
                "size": self.options.size,
                "quality": self.options.quality,
                "style": self.options.style,
                "usage": self.usage,
                "createdAt": format_datetime_iso(self.created_at),
            }
        }

        if self.success:
            data = response["data"]
            if self.base64:
                data["base64"] = self.base64
            if self.url:
                data["url"] = self.url
            if self.filename:
                data["filename"] = self.filename
            if self.image_url:
                data["imageUrl"] = self.image_url
        else:
            response["error"] = self.error

        return response

"""
图片生成相关的请求与响应模型

请求字段全部可选，必填校验由处理器完成，以便返回统一的400错误格式。
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ImageGenerateRequest(BaseModel):
    """图片生成请求模型"""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    prompt: Optional[str] = Field(None, description="图片描述提示词")
    model: Optional[str] = Field(None, description="模型名称，默认 dall-e-3")
    size: Optional[str] = Field(None, description="图片尺寸，默认 1024x1024")
    quality: Optional[str] = Field(None, description="图片质量，默认 standard")
    style: Optional[str] = Field(None, description="图片风格，默认 vivid")
    save_to_file: bool = Field(False, alias="saveToFile", description="是否保存为本地文件")


class ImageGenerateUrlRequest(ImageGenerateRequest):
    """URL模式图片生成请求模型"""
    store: bool = Field(False, description="是否将图片保存到对象存储并返回签名URL")


class ImageDownloadProxyRequest(BaseModel):
    """图片下载代理请求模型"""
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(None, alias="imageUrl", description="要下载的图片URL")


class GeneratedImageData(BaseModel):
    """生成图片数据"""
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    created: Optional[int] = None
    prompt: str
    model: str
    size: str
    quality: str
    style: str
    usage: Optional[Dict[str, Any]] = None
    created_at: str = Field(..., alias="createdAt")
    base64: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")


class StoredImageInfo(BaseModel):
    """对象存储镜像信息"""
    model_config = ConfigDict(populate_by_name=True)

    provider: str = "supabase"
    url: str
    path: str
    content_type: str = Field(..., alias="contentType")
    size: int
    expires_in_seconds: int = Field(..., alias="expiresInSeconds")


class ImageGenerationResponse(BaseModel):
    """图片生成响应信封"""
    success: bool
    message: str
    data: GeneratedImageData
    error: Optional[str] = None
    stored: Optional[StoredImageInfo] = None

"""
应用配置
环境变量优先，其次读取 config/.env，最后使用这里的默认值
"""

from typing import List, Optional, Union

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.utils.config_utils import get_config_path, get_workspace_path, parse_json_config


class Settings(BaseSettings):
    """图片代理服务配置"""

    model_config = SettingsConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True
    )

    # 应用
    app_name: str = "AI Image Proxy"
    app_version: str = "1.0.0"
    app_debug: bool = True
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    # 兼容部署平台注入的PORT
    app_port: int = Field(3000, validation_alias=AliasChoices("APP_PORT", "PORT"))
    api_prefix: str = "/api"
    project_name: str = "AI Image Proxy API"
    cors_origins: Union[str, List[str]] = Field('["*"]', description="JSON数组或逗号分隔的来源列表")

    # OpenAI
    openai_api_key: str = ""
    openai_base_url: Optional[str] = None
    image_default_model: str = "dall-e-3"
    image_default_size: str = "1024x1024"
    image_default_quality: str = "standard"
    image_default_style: str = "vivid"
    image_generation_timeout: float = Field(30.0, gt=0, description="等待提供商的秒数，超时返回占位图片")
    image_placeholder_url: str = "https://via.placeholder.com/1024x1024/FF0000/FFFFFF?text=Fallback+Image"

    # 本地文件与远程下载
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/uploads"
    download_timeout: float = 30.0
    download_connect_timeout: float = 10.0
    download_default_filename: str = "image-download.png"

    # Supabase Storage，URL与服务端密钥都配置时启用
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_bucket: str = "openai-images"
    supabase_bucket_file_size_limit: str = "10MB"
    supabase_object_prefix: str = "openai"
    supabase_signed_url_expires: int = Field(3600, gt=0)

    # Mock认证
    SECRET_KEY: str = "development-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    mock_auth_enabled: bool = True
    mock_refresh_token: str = "dummy-refresh-token"

    # 日志
    log_level: str = "INFO"
    log_file: str = "backend.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, value: Union[str, List[str]]) -> List[str]:
        return parse_json_config(value)

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def workspace_dir(self) -> str:
        return str(get_workspace_path())

    @property
    def absolute_upload_dir(self) -> str:
        return str(get_workspace_path(self.upload_dir))

    @property
    def absolute_log_dir(self) -> str:
        return str(get_workspace_path("log"))

    @property
    def absolute_log_file(self) -> str:
        return str(get_workspace_path("log") / self.log_file)


def get_settings() -> Settings:
    return Settings()


settings = get_settings()

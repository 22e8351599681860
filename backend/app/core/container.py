"""
服务容器
应用启动时创建一次图片Provider、存储服务和HTTP客户端，由各请求共享
"""

from dataclasses import dataclass
from typing import Optional

import httpx
from fastapi import Request

from app.core.ai import AIProviderFactory, ModelCapability, ModelConfig, register_all_providers
from app.core.ai.providers.base.image_gen import BaseImageGenProvider
from app.core.config import Settings, settings as app_settings
from app.core.log_utils import get_logger
from app.core.storage import BaseStorage, get_storage_service
from app.models.image import ImageOptions
from app.services.image import (
    ImageGenerationHandler,
    ImageGenerationService,
    ImageGenerationStoreService,
    ImageProxyHandler,
)
from app.services.user import AuthHandler, MockAuthService
from app.utils.string_utils import mask_secret

logger = get_logger(__name__)


@dataclass
class ServiceContainer:
    """请求之间共享的外部客户端"""
    settings: Settings
    image_provider: BaseImageGenProvider
    http_client: httpx.AsyncClient
    auth_service: MockAuthService
    storage: Optional[BaseStorage] = None

    @property
    def default_options(self) -> ImageOptions:
        return ImageOptions(
            model=self.settings.image_default_model,
            size=self.settings.image_default_size,
            quality=self.settings.image_default_quality,
            style=self.settings.image_default_style
        )

    def image_generation_handler(self) -> ImageGenerationHandler:
        """创建图片生成处理器"""
        generation_service = ImageGenerationService(
            provider=self.image_provider,
            upload_dir=self.settings.absolute_upload_dir,
            upload_url_prefix=self.settings.upload_url_prefix,
            timeout=self.settings.image_generation_timeout,
            placeholder_url=self.settings.image_placeholder_url
        )
        store_service = ImageGenerationStoreService(
            storage=self.storage,
            http_client=self.http_client,
            object_prefix=self.settings.supabase_object_prefix,
            signed_url_expires=self.settings.supabase_signed_url_expires
        )
        return ImageGenerationHandler(generation_service, store_service, self.default_options)

    def image_proxy_handler(self) -> ImageProxyHandler:
        """创建图片下载代理处理器"""
        return ImageProxyHandler(self.http_client, self.settings.download_default_filename)

    def auth_handler(self) -> AuthHandler:
        """创建Mock认证处理器"""
        return AuthHandler(self.auth_service)

    async def aclose(self) -> None:
        """释放外部客户端连接"""
        await self.image_provider.close()
        if self.storage is not None:
            await self.storage.close()
        await self.http_client.aclose()
        logger.info("服务容器已关闭")


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """创建用于下载远程图片的共享客户端"""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.download_timeout, connect=settings.download_connect_timeout),
        follow_redirects=True
    )


def build_container(settings: Optional[Settings] = None) -> ServiceContainer:
    """
    根据配置创建服务容器

    Args:
        settings: 应用配置，默认使用全局配置

    Returns:
        ServiceContainer: 服务容器

    Raises:
        ConfigurationError: 对象存储已配置但创建失败时抛出
    """
    settings = settings or app_settings

    register_all_providers()
    provider = AIProviderFactory.create(ModelConfig.from_settings(settings), ModelCapability.IMAGE_GEN)

    container = ServiceContainer(
        settings=settings,
        image_provider=provider,
        http_client=create_http_client(settings),
        auth_service=MockAuthService(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            refresh_token=settings.mock_refresh_token
        ),
        storage=get_storage_service(settings)
    )
    logger.info("服务容器创建完成", extra={
        "provider": provider.PROVIDER_NAME,
        "api_key": mask_secret(settings.openai_api_key),
        "storage_enabled": container.storage is not None
    })
    return container


# ==================== FastAPI依赖 ====================

def get_container(request: Request) -> ServiceContainer:
    """获取应用级服务容器"""
    return request.app.state.container


def get_image_generation_handler(request: Request) -> ImageGenerationHandler:
    return get_container(request).image_generation_handler()


def get_image_proxy_handler(request: Request) -> ImageProxyHandler:
    return get_container(request).image_proxy_handler()


def get_auth_handler(request: Request) -> AuthHandler:
    return get_container(request).auth_handler()

"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures

根目录conftest.py包含全局共享fixtures，
单元测试和接口测试通过pytest markers区分
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.container import ServiceContainer
from app.services.user import MockAuthService
from main import create_app
from tests.utils import FakeImageProvider, make_png_bytes


@pytest.fixture
def test_settings(tmp_path):
    """指向临时上传目录的配置副本"""
    return settings.model_copy(update={
        "upload_dir": str(tmp_path / "uploads"),
        "image_generation_timeout": 0.5,
        "supabase_url": "",
        "supabase_service_role_key": "",
    })


@pytest.fixture
def png_bytes():
    """一张真实的PNG图片"""
    return make_png_bytes()


@pytest.fixture
def image_transport(png_bytes):
    """
    模拟远程图片服务器

    /missing.png 返回404，其余路径返回PNG图片
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/missing.png":
            return httpx.Response(404)
        return httpx.Response(200, content=png_bytes, headers={"content-type": "image/png"})

    return httpx.MockTransport(handler)


@pytest.fixture
def fake_provider():
    """默认返回URL和base64的Provider"""
    return FakeImageProvider()


@pytest.fixture
def auth_service(test_settings):
    return MockAuthService(
        secret_key=test_settings.SECRET_KEY,
        algorithm=test_settings.ALGORITHM,
        expire_minutes=test_settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        refresh_token=test_settings.mock_refresh_token
    )


@pytest.fixture
def build_test_container(test_settings, image_transport, fake_provider, auth_service):
    """创建注入了假依赖的服务容器的工厂"""
    def factory(provider=None, storage=None):
        return ServiceContainer(
            settings=test_settings,
            image_provider=provider or fake_provider,
            http_client=httpx.AsyncClient(transport=image_transport),
            auth_service=auth_service,
            storage=storage
        )
    return factory


@pytest.fixture
def make_client(build_test_container):
    """创建使用指定Provider和存储的TestClient"""
    clients = []

    def factory(provider=None, storage=None) -> TestClient:
        client = TestClient(create_app(build_test_container(provider, storage)))
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client):
    """默认测试客户端：假Provider，未配置对象存储"""
    return make_client()


# 测试标记配置
def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "interface: 接口测试")
    config.addinivalue_line("markers", "basic: 基础功能测试")
    config.addinivalue_line("markers", "images: 图片相关测试")
    config.addinivalue_line("markers", "storage: 对象存储测试")
    config.addinivalue_line("markers", "auth: Mock认证测试")
    config.addinivalue_line("markers", "logging: 日志测试")

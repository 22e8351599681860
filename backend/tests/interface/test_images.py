"""
图片接口测试
使用注入了假Provider和内存存储的应用实例，不访问外部服务
"""

import pytest

from app.core.ai.exceptions import ImageProviderError
from tests.utils.mock_utils import FakeImageProvider, FakeStorage, SIGNED_URL, TEST_IMAGE_URL

PLACEHOLDER_URL = "https://via.placeholder.com/1024x1024/FF0000/FFFFFF?text=Fallback+Image"


@pytest.mark.interface
@pytest.mark.images
class TestGenerateEndpoints:
    """图片生成端点测试类"""

    @pytest.mark.parametrize("path", [
        "/api/image/generate",
        "/api/image/generate-file",
        "/api/image/generate-base64",
        "/api/image/generate-url",
    ])
    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}])
    def test_missing_prompt_returns_400(self, make_client, path, body):
        provider = FakeImageProvider()
        client = make_client(provider=provider)

        response = client.post(path, json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "提示词不能为空"}
        assert provider.calls == []

    def test_missing_body_returns_400(self, client):
        response = client.post("/api/image/generate")

        assert response.status_code == 400
        assert "error" in response.json()

    def test_generate_url_mode(self, make_client):
        provider = FakeImageProvider()
        client = make_client(provider=provider)

        response = client.post("/api/image/generate", json={"prompt": "a cat", "size": "1792x1024"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "图片生成成功"
        assert body["data"]["url"] == TEST_IMAGE_URL
        assert body["data"]["size"] == "1792x1024"
        assert body["data"]["model"] == "dall-e-3"
        assert body["data"]["quality"] == "standard"
        assert body["data"]["style"] == "vivid"
        assert "base64" not in body["data"]
        assert provider.calls[0]["size"] == "1792x1024"

    def test_generate_save_to_file(self, client, test_settings):
        response = client.post("/api/image/generate", json={"prompt": "a cat", "saveToFile": True})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["imageUrl"] == f"/uploads/{data['filename']}"
        assert "base64" not in data
        assert "url" not in data

    def test_generate_file_is_served(self, client, png_bytes):
        response = client.post("/api/image/generate-file", json={"prompt": "a cat"})
        image_url = response.json()["data"]["imageUrl"]

        served = client.get(image_url)

        assert served.status_code == 200
        assert served.content == png_bytes

    def test_generate_base64(self, client):
        response = client.post("/api/image/generate-base64", json={"prompt": "a cat"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["base64"]
        assert "url" not in data

    def test_timeout_returns_placeholder(self, make_client):
        client = make_client(provider=FakeImageProvider(delay=1))

        response = client.post("/api/image/generate", json={"prompt": "a cat"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["url"] == PLACEHOLDER_URL
        assert body["data"]["usage"] == {"prompt_tokens": 10, "completion_tokens": 0, "total_tokens": 10}

    def test_timeout_in_base64_mode_returns_placeholder_url(self, make_client):
        client = make_client(provider=FakeImageProvider(delay=1))

        response = client.post("/api/image/generate-base64", json={"prompt": "a cat"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["url"] == PLACEHOLDER_URL
        assert "base64" not in data
        assert data["usage"]["total_tokens"] == 10

    def test_provider_error_returns_500(self, make_client):
        client = make_client(provider=FakeImageProvider(
            error=ImageProviderError("API认证失败，请检查API密钥: invalid key", code="auth")
        ))

        response = client.post("/api/image/generate-url", json={"prompt": "a cat", "store": True})

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "图片生成失败"
        assert "invalid key" in body["error"]
        assert body["data"]["prompt"] == "a cat"
        assert "url" not in body["data"]
        assert "stored" not in body


@pytest.mark.interface
@pytest.mark.storage
class TestGenerateUrlStore:
    """生成并镜像保存测试类"""

    def test_store_without_storage_configured(self, client):
        response = client.post("/api/image/generate-url", json={"prompt": "a cat", "store": True})

        assert response.status_code == 200
        body = response.json()
        assert body["data"]["url"] == TEST_IMAGE_URL
        assert "stored" not in body

    def test_store_with_storage(self, make_client, png_bytes):
        storage = FakeStorage()
        client = make_client(storage=storage)

        response = client.post("/api/image/generate-url", json={"prompt": "A Cat", "store": True})

        assert response.status_code == 200
        body = response.json()
        stored = body["stored"]
        assert stored["provider"] == "supabase"
        assert stored["url"] == SIGNED_URL
        assert stored["path"].startswith("openai/a-cat-")
        assert stored["contentType"] == "image/png"
        assert stored["size"] == len(png_bytes)
        assert stored["expiresInSeconds"] == 3600
        assert body["data"]["url"] == TEST_IMAGE_URL

    def test_store_flag_off_skips_storage(self, make_client):
        storage = FakeStorage()
        client = make_client(storage=storage)

        response = client.post("/api/image/generate-url", json={"prompt": "a cat"})

        assert "stored" not in response.json()
        assert storage.objects == {}

    def test_store_failure_degrades(self, make_client):
        client = make_client(storage=FakeStorage(fail_upload=True))

        response = client.post("/api/image/generate-url", json={"prompt": "a cat", "store": True})

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert "stored" not in response.json()

    def test_store_download_failure_degrades(self, make_client):
        client = make_client(
            provider=FakeImageProvider(url="https://images.example.com/missing.png"),
            storage=FakeStorage()
        )

        response = client.post("/api/image/generate-url", json={"prompt": "a cat", "store": True})

        assert response.status_code == 200
        assert "stored" not in response.json()


@pytest.mark.interface
@pytest.mark.images
class TestDownloadProxy:
    """图片下载代理测试类"""

    def test_missing_image_url(self, client):
        response = client.post("/api/image/download-proxy", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "图片URL不能为空"}

    def test_relays_image(self, client, png_bytes):
        response = client.post(
            "/api/image/download-proxy",
            json={"imageUrl": "https://images.example.com/cat.png"}
        )

        assert response.status_code == 200
        assert response.content == png_bytes
        assert response.headers["content-type"] == "image/png"
        assert response.headers["content-length"] == str(len(png_bytes))
        assert response.headers["content-disposition"] == 'attachment; filename="image-download.png"'

    def test_upstream_error_returns_500(self, client):
        response = client.post(
            "/api/image/download-proxy",
            json={"imageUrl": "https://images.example.com/missing.png"}
        )

        assert response.status_code == 500
        assert response.json()["error"].startswith("下载图片失败: ")

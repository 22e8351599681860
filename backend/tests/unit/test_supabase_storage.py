"""
Supabase存储适配器单元测试
使用mock客户端，不访问网络
"""

import pytest
from unittest.mock import patch

from app.core.storage import create_adapter, get_storage_service, list_available_adapters
from app.core.storage.adapters.supabase_storage import SupabaseStorageAdapter
from app.core.storage.exceptions import ConfigurationError, URLError, UploadError
from tests.utils.mock_utils import MockBuilder, SIGNED_URL


def build_adapter(client=None):
    return SupabaseStorageAdapter(
        url="https://project.supabase.co",
        service_role_key="service-role-key",
        bucket="openai-images",
        file_size_limit="10MB",
        client=client or MockBuilder.create_mock_supabase_client()
    )


@pytest.mark.unit
@pytest.mark.storage
class TestSupabaseStorageAdapter:
    """SupabaseStorageAdapter 单元测试类"""

    def test_registered_in_factory(self):
        assert "supabase" in list_available_adapters()

    def test_init_with_missing_config(self):
        with pytest.raises(ConfigurationError):
            SupabaseStorageAdapter(url="", service_role_key="key", bucket="openai-images")

    def test_init_creates_client(self):
        with patch("app.core.storage.adapters.supabase_storage.create_client") as mock_create:
            SupabaseStorageAdapter(url="https://p.supabase.co", service_role_key="key", bucket="b")

        mock_create.assert_called_once_with("https://p.supabase.co", "key")

    @pytest.mark.asyncio
    async def test_upload_creates_private_bucket_once(self):
        client = MockBuilder.create_mock_supabase_client()
        adapter = build_adapter(client)

        await adapter.upload(b"abc", "openai/cat-1.png", "image/png")
        result = await adapter.upload(b"abcd", "openai/cat-2.png", "image/png")

        client.storage.create_bucket.assert_called_once_with(
            "openai-images",
            options={"public": False, "file_size_limit": "10MB"}
        )
        client.storage.from_.return_value.upload.assert_called_with(
            "openai/cat-2.png",
            b"abcd",
            {"content-type": "image/png", "upsert": "true"}
        )
        assert result.key == "openai/cat-2.png"
        assert result.size == 4
        assert result.bucket == "openai-images"

    @pytest.mark.asyncio
    async def test_existing_bucket_is_ignored(self):
        client = MockBuilder.create_mock_supabase_client()
        client.storage.create_bucket.side_effect = Exception("The resource already exists")
        adapter = build_adapter(client)

        await adapter.upload(b"abc", "openai/cat.png", "image/png")

        client.storage.from_.return_value.upload.assert_called_once()

    @pytest.mark.asyncio
    async def test_bucket_creation_failure_still_uploads(self):
        client = MockBuilder.create_mock_supabase_client()
        client.storage.create_bucket.side_effect = Exception("new row violates row-level security policy")
        adapter = build_adapter(client)

        signed = await adapter.upload_and_sign(b"abc", "openai/cat.png", "image/png", expires=3600)
        await adapter.upload(b"abcd", "openai/dog.png", "image/png")

        assert signed.url == SIGNED_URL
        assert client.storage.from_.return_value.upload.call_count == 2
        client.storage.create_bucket.assert_called_once()

    @pytest.mark.asyncio
    async def test_upload_failure(self):
        client = MockBuilder.create_mock_supabase_client()
        client.storage.from_.return_value.upload.side_effect = Exception("payload too large")
        adapter = build_adapter(client)

        with pytest.raises(UploadError, match="payload too large"):
            await adapter.upload(b"abc", "openai/cat.png", "image/png")

    @pytest.mark.asyncio
    async def test_generate_signed_url(self):
        client = MockBuilder.create_mock_supabase_client()
        adapter = build_adapter(client)

        url = await adapter.generate_url("openai/cat.png", expires=3600)

        assert url == SIGNED_URL
        client.storage.from_.return_value.create_signed_url.assert_called_once_with("openai/cat.png", 3600)

    @pytest.mark.asyncio
    async def test_generate_signed_url_camel_case_key(self):
        client = MockBuilder.create_mock_supabase_client(signed_response={"signedUrl": SIGNED_URL})

        assert await build_adapter(client).generate_url("openai/cat.png") == SIGNED_URL

    @pytest.mark.asyncio
    async def test_generate_url_missing_field(self):
        client = MockBuilder.create_mock_supabase_client(signed_response={})

        with pytest.raises(URLError):
            await build_adapter(client).generate_url("openai/cat.png")

    @pytest.mark.asyncio
    async def test_upload_and_sign(self):
        adapter = build_adapter()

        signed = await adapter.upload_and_sign(b"abc", "openai/cat.png", "image/png", expires=600)

        assert signed.url == SIGNED_URL
        assert signed.key == "openai/cat.png"
        assert signed.size == 3
        assert signed.expires_in == 600

    @pytest.mark.asyncio
    async def test_generate_url_rejects_put(self):
        with pytest.raises(URLError):
            await build_adapter().generate_url("openai/cat.png", operation="put")


@pytest.mark.unit
@pytest.mark.storage
class TestGetStorageService:
    """存储服务工厂测试"""

    def test_unknown_adapter(self):
        with pytest.raises(ConfigurationError, match="不存在"):
            create_adapter("cos")

    def test_disabled_without_credentials(self, test_settings):
        assert get_storage_service(test_settings) is None

    def test_enabled_with_credentials(self, test_settings):
        configured = test_settings.model_copy(update={
            "supabase_url": "https://project.supabase.co",
            "supabase_service_role_key": "service-role-key",
        })

        with patch("app.core.storage.adapters.supabase_storage.create_client"):
            storage = get_storage_service(configured)

        assert isinstance(storage, SupabaseStorageAdapter)
        assert storage.bucket == "openai-images"

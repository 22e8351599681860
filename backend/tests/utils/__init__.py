"""
测试工具包
提供统一的测试工具和辅助函数
"""

from .mock_utils import (
    FakeImageProvider,
    FakeStorage,
    MockBuilder,
    SIGNED_URL,
    TEST_IMAGE_URL,
    make_jpeg_bytes,
    make_png_bytes,
)

__all__ = [
    'FakeImageProvider',
    'FakeStorage',
    'MockBuilder',
    'SIGNED_URL',
    'TEST_IMAGE_URL',
    'make_jpeg_bytes',
    'make_png_bytes',
]

"""
日志系统单元测试
覆盖模板渲染、结构化字段和调试开关，不写入真实日志文件
"""

import logging
import pytest
from unittest.mock import patch

from app.core.log_utils import UnifiedLogger, get_logger
from app.core.log_messages import LogMessages, log_messages


@pytest.mark.unit
@pytest.mark.logging
class TestUnifiedLogger:
    """UnifiedLogger 单元测试类"""

    def setup_method(self):
        self.unified_logger = UnifiedLogger("tests.image_proxy")

    def test_wraps_stdlib_logger(self):
        assert isinstance(self.unified_logger.logger, logging.Logger)
        assert self.unified_logger.logger.name == "tests.image_proxy"

    def test_plain_message_is_not_formatted(self):
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info("下载结果: {'size': 1024}")

            assert mock_info.call_args[0][0] == "下载结果: {'size': 1024}"
            assert mock_info.call_args[1]['extra'] == {'log_module': "tests.image_proxy"}

    def test_template_arguments_become_fields(self):
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info(log_messages.IMAGE_GENERATION_START, mode="base64", model="dall-e-3")

            assert mock_info.call_args[0][0] == "开始生成图片，输出模式: base64"
            extra = mock_info.call_args[1]['extra']
            assert extra['mode'] == "base64"
            assert extra['model'] == "dall-e-3"

    def test_missing_template_argument_keeps_template(self):
        with patch.object(self.unified_logger.logger, 'warning') as mock_warning:
            self.unified_logger.warning(log_messages.IMAGE_GENERATION_TIMEOUT, seconds=30)

            assert mock_warning.call_args[0][0] == log_messages.IMAGE_GENERATION_TIMEOUT

    @pytest.mark.parametrize("key", ["filename", "created", "name", "message"])
    def test_reserved_record_keys_are_prefixed(self, key):
        with patch.object(self.unified_logger.logger, 'info') as mock_info:
            self.unified_logger.info("写入文件", **{key: "x"})

            extra = mock_info.call_args[1]['extra']
            assert extra[f"ctx_{key}"] == "x"
            assert key not in extra

    def test_reserved_keys_reach_real_logger(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tests.image_proxy"):
            self.unified_logger.warning("占位图片已返回", name="x", module="y")

        assert caplog.records[-1].ctx_name == "x"
        assert caplog.records[-1].ctx_module == "y"

    def test_error_with_exception(self):
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            exc = TimeoutError("provider too slow")
            self.unified_logger.error("图片生成失败，输出模式: {mode}", exception=exc, mode="url")

            args, kwargs = mock_error.call_args
            assert args[0] == "图片生成失败，输出模式: url"
            assert kwargs['exc_info'] is exc
            assert kwargs['extra']['exception_type'] == "TimeoutError"
            assert kwargs['extra']['exception_message'] == "provider too slow"

    def test_error_without_exception(self):
        with patch.object(self.unified_logger.logger, 'error') as mock_error:
            self.unified_logger.error("保存图片文件失败")

            assert 'exc_info' not in mock_error.call_args[1]

    @pytest.mark.parametrize("debug_enabled,expected_calls", [(True, 1), (False, 0)])
    def test_debug_follows_app_debug(self, debug_enabled, expected_calls):
        with patch('app.core.log_utils.settings') as mock_settings, \
                patch.object(self.unified_logger.logger, 'debug') as mock_debug:
            mock_settings.app_debug = debug_enabled
            self.unified_logger.debug("OpenAI客户端已就绪")

        assert mock_debug.call_count == expected_calls

    def test_critical(self):
        with patch.object(self.unified_logger.logger, 'critical') as mock_critical:
            self.unified_logger.critical("服务容器创建失败")

            mock_critical.assert_called_once()


@pytest.mark.unit
@pytest.mark.logging
def test_get_logger_is_cached_per_name():
    first = get_logger("tests.cache")

    assert first is get_logger("tests.cache")
    assert first is not get_logger("tests.other")
    assert isinstance(first, UnifiedLogger)


@pytest.mark.unit
@pytest.mark.logging
def test_log_messages_format_and_fields():
    messages = LogMessages()

    assert messages.format_message("图片生成超时（{timeout}秒）", timeout=0.5) == "图片生成超时（0.5秒）"
    assert messages.get_structured_data(mode="file") == {"mode": "file"}

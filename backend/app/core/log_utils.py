"""
统一日志管理模块
在标准库logging之上提供模板消息与结构化字段
"""

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from app.core.config import settings
from app.core.log_messages import log_messages

# LogRecord自带的属性名，结构化字段与之重名时加ctx_前缀
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}

_QUIET_LOGGERS = ("uvicorn", "fastapi", "httpx", "httpcore", "openai", "supabase")


class UnifiedLogger:
    """
    业务日志记录器

    关键字参数同时用于填充消息模板和作为结构化字段写入LogRecord：

        logger.info("图片生成超时（{timeout}秒）", timeout=30)
        logger.warning("保存失败", extra={"object_key": key})
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def _fields(self, **kwargs: Any) -> Dict[str, Any]:
        data = log_messages.get_structured_data(log_module=self.name, **kwargs)
        return {
            f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key: value
            for key, value in data.items()
        }

    @staticmethod
    def _render(template: str, **kwargs: Any) -> str:
        # 无参数时不格式化，已拼接好的消息中可能含有花括号
        if not kwargs:
            return template
        try:
            return log_messages.format_message(template, **kwargs)
        except (KeyError, ValueError, IndexError):
            return template

    def _log(self, log_method: Callable[..., None], template: str, **kwargs: Any) -> None:
        log_method(self._render(template, **kwargs), extra=self._fields(**kwargs))

    def debug(self, template: str, **kwargs: Any) -> None:
        """仅在APP_DEBUG开启时输出"""
        if settings.app_debug:
            self._log(self.logger.debug, template, **kwargs)

    def info(self, template: str, **kwargs: Any) -> None:
        self._log(self.logger.info, template, **kwargs)

    def warning(self, template: str, **kwargs: Any) -> None:
        self._log(self.logger.warning, template, **kwargs)

    def error(self, template: str, exception: Optional[BaseException] = None, **kwargs: Any) -> None:
        """
        记录错误日志

        Args:
            template: 消息或消息模板
            exception: 附带的异常，记录类型、消息和堆栈
            **kwargs: 模板参数与结构化字段
        """
        if exception is None:
            self._log(self.logger.error, template, **kwargs)
            return

        fields = self._fields(**kwargs)
        fields["exception_type"] = type(exception).__name__
        fields["exception_message"] = str(exception)
        self.logger.error(self._render(template, **kwargs), extra=fields, exc_info=exception)

    def critical(self, template: str, **kwargs: Any) -> None:
        self._log(self.logger.critical, template, **kwargs)


_loggers: Dict[str, UnifiedLogger] = {}


def get_logger(name: str = __name__) -> UnifiedLogger:
    """按名称返回缓存的UnifiedLogger"""
    return _loggers.setdefault(name, UnifiedLogger(name))


def _build_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(settings.log_format))
    return handler


def setup_logging() -> None:
    """
    配置根日志记录器

    控制台按LOG_LEVEL输出（调试模式下为DEBUG），
    workspace/log 下的文件固定记录INFO及以上级别。
    """
    Path(settings.absolute_log_dir).mkdir(parents=True, exist_ok=True)

    if settings.app_debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    root.addHandler(_build_handler(logging.StreamHandler(sys.stdout), level))
    root.addHandler(_build_handler(
        logging.FileHandler(settings.absolute_log_file, encoding="utf-8"),
        logging.INFO
    ))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(log_messages.OPERATION_SUCCESS, operation_name="日志系统配置")

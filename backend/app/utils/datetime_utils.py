"""
日期时间工具模块
统一使用UTC
"""

import time
from datetime import datetime, timezone
from typing import Optional


def get_current_timestamp() -> int:
    return int(time.time())


def get_current_timestamp_ms() -> int:
    return time.time_ns() // 1_000_000


def get_current_datetime() -> datetime:
    return datetime.now(timezone.utc)


def format_datetime_iso(dt: Optional[datetime] = None) -> str:
    """
    格式化为毫秒精度的UTC ISO字符串，如 2024-01-01T00:00:00.000Z

    无时区信息的时间按UTC处理。
    """
    dt = dt or get_current_datetime()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

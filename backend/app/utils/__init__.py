"""
通用工具模块包
提供项目通用的工具函数和辅助类
"""

from .config_utils import (
    get_workspace_path,
    get_config_path,
    parse_json_config,
    ensure_directory_exists
)

from .id_utils import generate_image_filename

from .datetime_utils import (
    get_current_timestamp,
    get_current_timestamp_ms,
    get_current_datetime,
    format_datetime_iso
)

from .string_utils import (
    truncate_string,
    generate_slug,
    mask_secret
)

from .file_utils import (
    get_extension_for_mime_type,
    sniff_image_mime_type,
    is_image_mime_type
)

from .async_utils import (
    Completed,
    TimedOut,
    wait_bounded
)

__all__ = [
    # config_utils
    'get_workspace_path', 'get_config_path',
    'parse_json_config', 'ensure_directory_exists',

    # id_utils
    'generate_image_filename',

    # datetime_utils
    'get_current_timestamp', 'get_current_timestamp_ms', 'get_current_datetime',
    'format_datetime_iso',

    # string_utils
    'truncate_string', 'generate_slug', 'mask_secret',

    # file_utils
    'get_extension_for_mime_type', 'sniff_image_mime_type', 'is_image_mime_type',

    # async_utils
    'Completed', 'TimedOut', 'wait_bounded'
]

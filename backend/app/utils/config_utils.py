"""
配置工具模块
项目路径计算与配置值解析
"""

import json
import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

# backend/app/utils 的上三级目录
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def get_workspace_path(sub_path: str = "") -> Path:
    """workspace目录下的路径"""
    return PROJECT_ROOT / "workspace" / sub_path if sub_path else PROJECT_ROOT / "workspace"


def get_config_path(sub_path: str = "") -> Path:
    return PROJECT_ROOT / "config" / sub_path if sub_path else PROJECT_ROOT / "config"


def parse_json_config(value: Union[str, List[str], None]) -> List[str]:
    """
    解析列表类型的配置值

    支持JSON数组（'["a", "b"]'）和逗号分隔（'a, b'）两种写法，
    已经是列表时原样返回。
    """
    if not value:
        return []
    if isinstance(value, list):
        return value

    text = value.strip()
    if text.startswith("["):
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError:
            logger.warning("JSON配置解析失败: %s", value)
            return []
        return [str(item) for item in parsed]

    return [item.strip() for item in text.split(",") if item.strip()]


def ensure_directory_exists(path: Union[str, Path]) -> Path:
    """创建目录（含父目录），返回Path对象"""
    path = Path(path)
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.info("创建目录: %s", path)
    return path

"""
字符串工具模块
提供统一的字符串处理函数
"""

import re


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """
    截断字符串，如果超过最大长度则添加后缀

    Args:
        text: 要截断的字符串
        max_length: 最大长度
        suffix: 截断后添加的后缀

    Returns:
        str: 截断后的字符串
    """
    if len(text) <= max_length:
        return text

    if max_length <= len(suffix):
        return suffix[:max_length]

    return text[:max_length - len(suffix)] + suffix


def generate_slug(text: str, max_length: int = 60, default: str = "image") -> str:
    """
    生成对象存储键使用的slug

    小写后将 [a-z0-9-_] 以外的连续字符替换为单个连字符，
    去掉首尾连字符后截断到最大长度。

    Args:
        text: 原始文本（通常是提示词）
        max_length: 最大长度
        default: 文本为空时使用的默认值

    Returns:
        str: 生成的slug
    """
    slug = (text or default).lower()
    slug = re.sub(r'[^a-z0-9\-_]+', '-', slug)
    slug = slug.strip('-')
    return slug[:max_length] or default


def mask_secret(value: str, visible: int = 4) -> str:
    """
    屏蔽密钥，只保留末尾几位

    Args:
        value: 原始密钥
        visible: 保留的位数

    Returns:
        str: 屏蔽后的字符串
    """
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]

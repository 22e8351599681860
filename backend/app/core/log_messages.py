"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 图片生成相关 ====================
    IMAGE_GENERATION_START = "开始生成图片，输出模式: {mode}"
    IMAGE_GENERATION_SUCCESS = "图片生成成功，输出模式: {mode}"
    IMAGE_GENERATION_FAILED = "图片生成失败，输出模式: {mode}"
    IMAGE_GENERATION_TIMEOUT = "图片生成超时（{timeout}秒），使用占位图片"

    # ==================== 图片存储相关 ====================
    IMAGE_STORE_START = "开始将生成图片保存到对象存储"
    IMAGE_STORE_SUCCESS = "生成图片已保存到对象存储"
    IMAGE_STORE_FAILED = "保存到对象存储失败，返回原始结果"
    STORAGE_DISABLED = "对象存储未配置，跳过保存"

    # ==================== 图片下载相关 ====================
    IMAGE_DOWNLOAD_START = "开始下载图片"
    IMAGE_DOWNLOAD_SUCCESS = "图片下载成功"
    IMAGE_DOWNLOAD_FAILED = "图片下载失败"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()

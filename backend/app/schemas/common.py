"""
通用Pydantic模型
用于标准化API响应
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """客户端错误响应模型"""
    error: str


class HealthResponse(BaseModel):
    """健康检查响应模型"""
    status: str = "healthy"

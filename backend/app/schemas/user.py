"""
Mock认证相关的请求与响应模型
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """注册请求模型"""
    name: Optional[str] = None
    surname: Optional[str] = None
    cpf: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class LoginRequest(BaseModel):
    """登录请求模型"""
    email: Optional[str] = None
    password: Optional[str] = None


class UserInfo(BaseModel):
    """占位用户信息"""
    id: str
    email: str
    name: str


class TokenResponse(BaseModel):
    """令牌响应模型"""
    model_config = {"populate_by_name": True}

    message: Optional[str] = None
    token: str
    refresh_token: str = Field(..., alias="refreshToken")
    user: Optional[UserInfo] = None

"""
Mock认证API端点
仅用于前端联调，不做真实的凭据校验
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from app.core.container import get_auth_handler
from app.schemas.common import ErrorResponse
from app.schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserInfo
from app.services.user import AuthHandler

router = APIRouter(tags=["Mock认证"])


@router.post(
    "/register",
    response_model=TokenResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    summary="注册（Mock）"
)
async def register(
    register_request: Optional[RegisterRequest] = None,
    handler: AuthHandler = Depends(get_auth_handler)
) -> Dict[str, Any]:
    return handler.handle_register(register_request or RegisterRequest())


@router.post(
    "/login",
    response_model=TokenResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    summary="登录（Mock）"
)
async def login(
    login_request: Optional[LoginRequest] = None,
    handler: AuthHandler = Depends(get_auth_handler)
) -> Dict[str, Any]:
    return handler.handle_login(login_request or LoginRequest())


@router.post(
    "/refresh",
    response_model=TokenResponse,
    response_model_exclude_none=True,
    summary="刷新令牌（Mock）"
)
async def refresh(handler: AuthHandler = Depends(get_auth_handler)) -> Dict[str, Any]:
    return handler.handle_refresh()


@router.get("/me", response_model=UserInfo, summary="当前用户（Mock）")
async def me(handler: AuthHandler = Depends(get_auth_handler)) -> Dict[str, str]:
    return handler.handle_me()

"""
Mock认证业务处理器
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from app.schemas.user import LoginRequest, RegisterRequest
from app.services.user.auth_service import MockAuthService

REQUIRED_FIELDS_MESSAGE = "必填字段不能为空"


class AuthHandler:
    """Mock认证业务处理器"""

    def __init__(self, auth_service: MockAuthService):
        self.auth_service = auth_service

    @staticmethod
    def _require(*values: Optional[str]) -> None:
        if not all(value and value.strip() for value in values):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=REQUIRED_FIELDS_MESSAGE
            )

    def handle_register(self, request: RegisterRequest) -> Dict[str, Any]:
        """
        处理注册请求

        Raises:
            HTTPException: name、surname、cpf、email、password任一为空时抛出400
        """
        self._require(request.name, request.surname, request.cpf, request.email, request.password)
        return self.auth_service.register(request.email, request.name)

    def handle_login(self, request: LoginRequest) -> Dict[str, Any]:
        """
        处理登录请求

        Raises:
            HTTPException: email或password为空时抛出400
        """
        self._require(request.email, request.password)
        return self.auth_service.login(request.email)

    def handle_refresh(self) -> Dict[str, Any]:
        return self.auth_service.refresh()

    def handle_me(self) -> Dict[str, str]:
        return self.auth_service.me()

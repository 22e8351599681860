"""
Mock认证服务
签发测试用访问令牌，不校验凭据也不持久化用户
"""

from datetime import timedelta
from typing import Any, Dict

import jwt

from app.core.log_utils import get_logger
from app.utils.datetime_utils import get_current_datetime

logger = get_logger(__name__)

PLACEHOLDER_USER_ID = "temp"
PLACEHOLDER_EMAIL = "temp@test.com"
PLACEHOLDER_NAME = "Temp User"


class MockAuthService:
    """
    Mock认证服务

    仅用于前端联调，签发的令牌不代表任何真实身份。
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
        refresh_token: str = "dummy-refresh-token"
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self.refresh_token = refresh_token

    @staticmethod
    def build_user(email: str, name: str) -> Dict[str, str]:
        """构造占位用户"""
        return {"id": PLACEHOLDER_USER_ID, "email": email, "name": name}

    def create_access_token(self, user: Dict[str, str]) -> str:
        """
        签发访问令牌

        Args:
            user: 占位用户信息

        Returns:
            str: HS256签名的JWT
        """
        now = get_current_datetime()
        claims: Dict[str, Any] = {
            **user,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
            "mock": True,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def register(self, email: str, name: str) -> Dict[str, Any]:
        user = self.build_user(email, name)
        logger.info("Mock用户注册", extra={"email": email})
        return {
            "message": "用户创建成功（测试版本）",
            "token": self.create_access_token(user),
            "refreshToken": self.refresh_token,
        }

    def login(self, email: str) -> Dict[str, Any]:
        # 用户名取邮箱@之前的部分
        user = self.build_user(email, email.split("@")[0])
        logger.info("Mock用户登录", extra={"email": email})
        return {
            "token": self.create_access_token(user),
            "refreshToken": self.refresh_token,
            "user": user,
        }

    def refresh(self) -> Dict[str, Any]:
        user = self.build_user(PLACEHOLDER_EMAIL, PLACEHOLDER_NAME)
        return {
            "token": self.create_access_token(user),
            "refreshToken": self.refresh_token,
        }

    def me(self) -> Dict[str, str]:
        return self.build_user(PLACEHOLDER_EMAIL, PLACEHOLDER_NAME)

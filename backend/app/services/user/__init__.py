"""
用户服务模块
提供Mock认证，不包含真实的凭据校验
"""

from .auth_service import MockAuthService
from .auth_handler import AuthHandler

__all__ = ['MockAuthService', 'AuthHandler']

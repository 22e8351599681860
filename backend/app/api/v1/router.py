"""
API路由聚合模块
将所有v1版本的路由统一注册

路由管理规范：
1. 所有路由文件内部使用相对路径（不以/开头的前缀由此处统一管理）
2. 所有前缀统一在router.py中管理
3. Tags统一使用中文，与端点文件定义保持一致
"""

from fastapi import APIRouter

from app.api.v1.endpoints import image_generation, image_proxy, user


def create_api_router(mock_auth_enabled: bool = True) -> APIRouter:
    """
    创建API路由

    Args:
        mock_auth_enabled: 是否注册Mock认证路由

    Returns:
        APIRouter: 聚合后的路由
    """
    api_router = APIRouter()

    # ==================== 图片生成与下载代理路由 ====================
    api_router.include_router(image_generation.router, prefix="/image", tags=["图片生成"])
    api_router.include_router(image_proxy.router, prefix="/image", tags=["图片代理"])

    # ==================== Mock认证路由 ====================
    if mock_auth_enabled:
        api_router.include_router(user.router, prefix="/user", tags=["Mock认证"])

    return api_router

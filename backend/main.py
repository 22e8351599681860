"""
AI Image Proxy - FastAPI主应用
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.v1.router import create_api_router
from app.core.config import settings
from app.core.container import ServiceContainer, build_container
from app.core.log_utils import setup_logging, get_logger
from app.schemas.common import HealthResponse
from app.utils.config_utils import ensure_directory_exists

logger = get_logger(__name__)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    创建FastAPI应用

    Args:
        container: 外部注入的服务容器，为空时在启动阶段按全局配置创建

    Returns:
        FastAPI: 应用实例
    """
    app_settings = container.settings if container is not None else settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理"""
        setup_logging()
        logger.info("应用启动中...")

        app.state.container = container or build_container(app_settings)
        logger.info("应用启动完成", extra={
            "port": app_settings.app_port,
            "storage_enabled": app.state.container.storage is not None,
            "mock_auth_enabled": app_settings.mock_auth_enabled
        })

        yield

        # 注入的容器由调用方负责关闭
        if container is None:
            await app.state.container.aclose()
        logger.info("应用关闭")

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.app_version,
        description="AI图片生成代理服务",
        openapi_url=f"{app_settings.api_prefix}/openapi.json",
        docs_url=f"{app_settings.api_prefix}/docs",
        redoc_url=f"{app_settings.api_prefix}/redoc",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "Content-Length"]
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
        """客户端错误统一返回 {"error": 消息}"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("请求参数校验失败", extra={"errors": str(exc.errors())})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "请求参数格式错误"}
        )

    app.include_router(
        create_api_router(mock_auth_enabled=app_settings.mock_auth_enabled),
        prefix=app_settings.api_prefix
    )

    # 文件模式保存的图片
    upload_dir = Path(app_settings.absolute_upload_dir)
    ensure_directory_exists(upload_dir)
    app.mount(
        app_settings.upload_url_prefix,
        StaticFiles(directory=upload_dir),
        name="uploads"
    )

    @app.get("/")
    def read_root():
        """根路径"""
        return {
            "message": app_settings.app_name,
            "version": app_settings.app_version,
            "docs": f"{app_settings.api_prefix}/docs"
        }

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """健康检查"""
        return HealthResponse()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug,
        log_level=settings.log_level.lower()
    )

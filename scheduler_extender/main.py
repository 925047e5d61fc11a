"""应用入口模块"""
import traceback
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi_offline import FastAPIOffline
from loguru import logger

from scheduler_extender.api.v1 import register_routers
from scheduler_extender.core.app_state import init_app_state
from scheduler_extender.core.config import Settings, settings as default_settings
from scheduler_extender.core.logging_config import setup_logging
from scheduler_extender.policies.registry import PolicyRegistry


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[PolicyRegistry] = None,
) -> FastAPI:
    """
    创建调度扩展器应用

    Args:
        settings: 应用配置，默认读取环境变量
        registry: 策略注册表，默认按配置注册res-pack等策略

    Returns:
        FastAPI: 应用实例
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理"""
        logger.info("调度扩展器启动中...")
        logger.info(f"应用名称: {settings.APP_NAME}")
        logger.info(f"版本: {settings.APP_VERSION}")
        logger.info(f"路由前缀: {settings.API_PREFIX}")
        yield
        logger.info("应用已关闭")

    app = FastAPIOffline(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    # 策略注册在接收请求之前完成
    init_app_state(app, settings, registry)

    # 注册API路由
    register_routers(app, settings.API_PREFIX)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """记录所有HTTP请求"""
        logger.info(f"请求: {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(f"响应: {request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        全局异常处理
        """
        error_detail = str(exc)
        logger.error(f"全局异常: {error_detail}")
        logger.error(traceback.format_exc())

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "message": "服务器内部错误",
                "detail": error_detail
            }
        )

    return app


app = create_app()


def run() -> None:
    """启动HTTP服务"""
    import uvicorn
    logger.info(f"服务启动，监听端口 {default_settings.HOST}:{default_settings.PORT}")
    uvicorn.run(
        "scheduler_extender.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()

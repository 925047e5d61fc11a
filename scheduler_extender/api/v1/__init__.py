"""
API v1版本路由
"""
from fastapi import FastAPI, APIRouter
from scheduler_extender.api.v1 import bind, filter, priority, version

# 调度扩展器路由模块列表
api_modules = [filter, priority, bind]


def register_routers(app: FastAPI, prefix: str) -> None:
    """
    注册所有API路由

    Args:
        app: FastAPI应用实例
        prefix: 调度扩展器路由前缀，例如 "/scheduler"
    """
    # 创建主路由器
    main_router = APIRouter()

    # 注册所有模块的路由器
    for module in api_modules:
        if hasattr(module, 'router'):
            main_router.include_router(module.router)

    # 将主路由器挂载到应用
    app.include_router(main_router, prefix=prefix)

    # 版本和健康检查路由不带前缀
    app.include_router(version.router)

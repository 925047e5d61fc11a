"""版本与健康检查路由"""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from scheduler_extender.core.app_state import get_settings
from scheduler_extender.core.config import Settings

router = APIRouter(tags=["version"])


@router.get("/version", response_class=PlainTextResponse)
async def version(settings: Settings = Depends(get_settings)) -> str:
    """返回构建版本号"""
    return settings.APP_VERSION


@router.get("/health")
async def health_check():
    """健康检查接口"""
    return {"status": "healthy"}

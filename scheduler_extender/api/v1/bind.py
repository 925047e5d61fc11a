"""节点绑定API路由模块"""
from loguru import logger
from fastapi import APIRouter, Depends, Request

from scheduler_extender.api.v1.utils import RequestDecodeError, decode_body, read_body
from scheduler_extender.core.app_state import get_bind_service
from scheduler_extender.schemas.bind import BindRequest, BindResponse
from scheduler_extender.services.bind_service import BindService

router = APIRouter(tags=["bind"])


@router.post("/bind", response_model=BindResponse, summary="节点绑定请求")
async def bind_pod_to_node(
    request: Request,
    bind_service: BindService = Depends(get_bind_service),
) -> BindResponse:
    """
    将Pod绑定到指定节点

    未配置绑定策略时返回不支持绑定的错误，由调度器自行完成绑定。

    Args:
        request: 原始请求，请求体为ExtenderBindingArgs

    Returns:
        BindResponse: 绑定响应，如果绑定失败，包含错误信息
    """
    body = await read_body(request)
    try:
        bind_request = decode_body(body, BindRequest)
    except RequestDecodeError as e:
        logger.warning(f"绑定请求解析失败: {str(e)}")
        return BindResponse(error=str(e))

    logger.info(f"收到节点绑定请求: Pod={bind_request.pod_name}, 节点={bind_request.node}")
    error = bind_service.bind_pod_to_node(bind_request)
    return BindResponse(error=error)

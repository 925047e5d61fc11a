"""节点过滤API路由"""
from loguru import logger
from fastapi import APIRouter, Depends, Path, Request

from scheduler_extender.api.v1.utils import RequestDecodeError, decode_body, read_body
from scheduler_extender.core.app_state import get_filter_service
from scheduler_extender.schemas.filter import FilterRequest, FilterResult
from scheduler_extender.services.filter_service import FilterService

# 创建路由器
router = APIRouter(tags=["filter"])


@router.post(
    "/predicates/{name}",
    response_model=FilterResult,
    response_model_by_alias=True,
    summary="节点过滤请求",
)
async def filter_nodes(
    request: Request,
    name: str = Path(..., description="过滤策略名称"),
    filter_service: FilterService = Depends(get_filter_service),
) -> FilterResult:
    """
    过滤节点接口

    使用路由名对应的过滤策略过滤候选节点。请求体无法解析时不调用任何策略，
    错误信息写入响应的Error字段。

    Args:
        request: 原始请求，请求体为ExtenderArgs
        name: 过滤策略名称

    Returns:
        过滤结果，包含可调度节点和失败节点及原因
    """
    body = await read_body(request)
    logger.debug(f"过滤策略 {name} ExtenderArgs = {body.decode('utf-8', errors='replace')}")

    try:
        filter_request = decode_body(body, FilterRequest)
    except RequestDecodeError as e:
        logger.warning(f"过滤请求解析失败: {str(e)}")
        return FilterResult(error=str(e))

    logger.info(
        f"收到过滤请求: 策略={name}, Pod={filter_request.pod.metadata.name}, "
        f"节点数量={len(filter_request.candidate_nodes())}"
    )
    return filter_service.filter_nodes(name, filter_request)

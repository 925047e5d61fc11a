"""节点打分API路由模块"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Request
from loguru import logger

from scheduler_extender.api.v1.utils import RequestDecodeError, decode_body, read_body
from scheduler_extender.core.app_state import get_policy_registry, get_priority_service
from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.schemas.priority import HostPriority, PriorityRequest
from scheduler_extender.services.priority_service import PriorityService

router = APIRouter(tags=["priority"])


async def _decode_priority_request(request: Request) -> PriorityRequest:
    """解析打分请求，格式错误时返回400，不产生部分结果"""
    body = await read_body(request)
    logger.debug(f"打分请求 ExtenderArgs = {body.decode('utf-8', errors='replace')}")
    try:
        return decode_body(body, PriorityRequest)
    except RequestDecodeError as e:
        logger.warning(f"打分请求解析失败: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/prioritize", response_model=List[HostPriority], summary="节点打分请求")
async def calculate_priority(
    request: Request,
    priority_service: PriorityService = Depends(get_priority_service),
) -> List[HostPriority]:
    """计算节点优先级

    按注册顺序调用所有打分策略并累加得分，每个候选节点恰好出现一次。

    Args:
        request: 原始请求，请求体为ExtenderArgs

    Returns:
        List[HostPriority]: 节点优先级列表
    """
    priority_request = await _decode_priority_request(request)
    try:
        return priority_service.prioritize(priority_request)
    except Exception as e:
        logger.error(f"计算节点优先级失败: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/prioritize/{name}", response_model=List[HostPriority], summary="单个策略节点打分请求")
async def calculate_priority_with(
    request: Request,
    name: str = Path(..., description="打分策略名称"),
    registry: PolicyRegistry = Depends(get_policy_registry),
    priority_service: PriorityService = Depends(get_priority_service),
) -> List[HostPriority]:
    """只使用指定名称的打分策略计算节点优先级

    Args:
        request: 原始请求，请求体为ExtenderArgs
        name: 打分策略名称

    Returns:
        List[HostPriority]: 节点优先级列表
    """
    scorer = registry.get_scorer(name)
    if scorer is None:
        raise HTTPException(status_code=404, detail=f"打分策略 {name} 未注册")

    priority_request = await _decode_priority_request(request)
    try:
        return priority_service.prioritize_with(scorer, priority_request)
    except Exception as e:
        logger.error(f"打分策略 {name} 计算节点优先级失败: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

"""节点过滤服务"""
from typing import Dict, List

from loguru import logger

from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.schemas.common import Node, NodeList
from scheduler_extender.schemas.filter import FilterRequest, FilterResult


class FilterService:
    """节点过滤服务类"""

    def __init__(self, registry: PolicyRegistry):
        self.registry = registry

    def filter_nodes(self, predicate_name: str, request: FilterRequest) -> FilterResult:
        """使用指定名称的过滤策略过滤候选节点

        Args:
            predicate_name: 过滤策略名称，即路由名
            request: 过滤请求

        Returns:
            FilterResult: 过滤结果，可调度节点一定是候选节点的子集
        """
        predicate = self.registry.get_predicate(predicate_name)
        if predicate is None:
            error = (
                f"Filter predicate '{predicate_name}' is not registered; "
                f"this extender does not support filtering with it. "
                f"Registered predicates: {self.registry.predicate_names}"
            )
            logger.warning(f"过滤策略 {predicate_name} 未注册")
            return FilterResult(error=error)

        pod = request.pod
        candidates = request.candidate_nodes()
        can_schedule: List[Node] = []
        failed_nodes: Dict[str, str] = {}

        for node in candidates:
            try:
                if predicate.check(pod, node):
                    can_schedule.append(node)
                else:
                    logger.debug(f"节点 {node.name} 未通过过滤策略 {predicate.name}")
            except Exception as e:
                failed_nodes[node.name] = str(e)
                logger.debug(f"过滤策略 {predicate.name} 检查节点 {node.name} 失败: {str(e)}")

        result = FilterResult(failed_nodes=failed_nodes)
        if request.nodes is not None:
            result.nodes = NodeList(items=can_schedule)
        else:
            result.node_names = [node.name for node in can_schedule]

        logger.info(
            f"过滤策略 {predicate.name}: Pod={pod.metadata.name}, 候选节点数量={len(candidates)}, "
            f"可调度节点数量={len(can_schedule)}, 失败节点数量={len(failed_nodes)}"
        )
        return result

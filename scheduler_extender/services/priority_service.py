"""节点打分服务模块"""
from typing import Dict, List, Sequence

from loguru import logger

from scheduler_extender.policies.base import PolicyContractError, Scorer
from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.schemas.priority import HostPriority, PriorityRequest


class PriorityService:
    """节点打分服务类

    按注册顺序调用打分策略并累加每个节点的得分。结果覆盖全部候选节点，
    每个节点恰好出现一次，未被打分的节点为0分。
    """

    def __init__(self, registry: PolicyRegistry):
        self.registry = registry

    def prioritize(self, request: PriorityRequest) -> List[HostPriority]:
        """使用所有已注册的打分策略计算节点优先级"""
        return self._combine(self.registry.scorers, request)

    def prioritize_with(self, scorer: Scorer, request: PriorityRequest) -> List[HostPriority]:
        """只使用一个打分策略计算节点优先级"""
        return self._combine([scorer], request)

    def _combine(self, scorers: Sequence[Scorer], request: PriorityRequest) -> List[HostPriority]:
        """
        Raises:
            PolicyError: 打分策略执行失败或返回了不满足约定的结果
        """
        pod = request.pod
        candidates = request.candidate_nodes()
        totals: Dict[str, int] = {node.name: 0 for node in candidates}

        for scorer in scorers:
            scored = set()
            for priority in scorer.score(pod, candidates):
                if priority.host not in totals:
                    raise PolicyContractError(
                        f"scorer '{scorer.name}' returned a score for unknown node '{priority.host}'"
                    )
                if priority.host in scored:
                    raise PolicyContractError(
                        f"scorer '{scorer.name}' returned more than one score for node '{priority.host}'"
                    )
                scored.add(priority.host)
                totals[priority.host] += priority.score
            logger.debug(f"打分策略 {scorer.name} 完成，已打分节点数量={len(scored)}")

        host_priorities = [HostPriority(host=host, score=score) for host, score in totals.items()]
        logger.info(
            f"节点优先级计算完成: Pod={pod.metadata.name}, 策略={[scorer.name for scorer in scorers]}, "
            f"得分={[(p.host, p.score) for p in host_priorities]}"
        )
        return host_priorities

"""稀缺资源集中放置(res-pack)打分策略"""
from typing import List

from loguru import logger

from scheduler_extender.policies.base import Scorer
from scheduler_extender.schemas.common import Node, Pod
from scheduler_extender.schemas.priority import HostPriority
from scheduler_extender.utils.resource_parser import pod_requests_resource, resource_milli


class ResourcePackScorer(Scorer):
    """按稀缺资源的已占用比例为节点打分

    Pod没有请求稀缺资源时所有节点得0分。否则已占用比例越高的节点得分越高，
    使请求稀缺资源的Pod集中到已经在使用该资源的节点上(worst-fit)，
    其他节点的稀缺资源保持完整，减少碎片。
    """

    name = "res-pack"

    def __init__(self, resource: str, max_priority: int = 10):
        if max_priority <= 0:
            raise ValueError(f"max_priority必须大于0: {max_priority}")
        self.resource = resource
        self.max_priority = max_priority

    def score(self, pod: Pod, nodes: List[Node]) -> List[HostPriority]:
        if not pod_requests_resource(pod, self.resource):
            logger.debug(f"Pod {pod.metadata.name} 未请求资源 {self.resource}，所有节点得0分")
            return [HostPriority(host=node.name, score=0) for node in nodes]

        return [HostPriority(host=node.name, score=self.node_score(node)) for node in nodes]

    def node_score(self, node: Node) -> int:
        """计算单个节点的得分: max_priority * 已分配 / 可分配，向上取整

        向上取整保证只要节点已占用该资源，得分就高于完全空闲的节点。
        得分范围为0..max_priority，占用比例接近的节点仍可能同分，调大max_priority可以减少同分。
        """
        status = node.status
        allocatable = resource_milli(status.allocatable, self.resource)
        if allocatable <= 0:
            allocatable = resource_milli(status.capacity, self.resource)
        if allocatable <= 0:
            return 0

        allocated = resource_milli(status.allocated, self.resource)
        score = -(-allocated * self.max_priority // allocatable)
        score = max(0, min(self.max_priority, score))
        logger.debug(
            f"节点 {node.name} 资源 {self.resource}: 已分配={allocated}m, 可分配={allocatable}m, 得分={score}"
        )
        return score

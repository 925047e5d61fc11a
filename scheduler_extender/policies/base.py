"""调度策略接口定义

过滤(Predicate)、打分(Scorer)、绑定(Binder)三类策略都是无状态的，
在进程启动时注册到PolicyRegistry，请求处理期间只读。
"""
from abc import ABC, abstractmethod
from typing import List

from scheduler_extender.schemas.common import Node, Pod
from scheduler_extender.schemas.priority import HostPriority


class PolicyError(Exception):
    """策略执行失败"""


class PolicyUnsupportedError(PolicyError):
    """扩展器未提供该类策略"""


class PolicyContractError(PolicyError):
    """策略返回结果不满足调度器约定"""


class Predicate(ABC):
    """过滤策略：判断节点是否可以运行Pod"""

    name: str = ""

    @abstractmethod
    def check(self, pod: Pod, node: Node) -> bool:
        """
        Returns:
            bool: 节点是否可调度

        Raises:
            PolicyError: 无法判断该节点，原因写入FailedNodes
        """


class Scorer(ABC):
    """打分策略：为候选节点打分，分数越高越优先"""

    name: str = ""

    @abstractmethod
    def score(self, pod: Pod, nodes: List[Node]) -> List[HostPriority]:
        """
        Returns:
            List[HostPriority]: 节点得分，未打分的节点按0分处理

        Raises:
            PolicyError: 打分失败
        """


class Binder(ABC):
    """绑定策略：将Pod绑定到选定节点"""

    name: str = ""

    @abstractmethod
    def bind(self, pod_name: str, pod_namespace: str, pod_uid: str, node: str) -> None:
        """
        Raises:
            PolicyError: 绑定失败
        """

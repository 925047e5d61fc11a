"""扩展器未提供的过滤和绑定策略

调度器配置了FilterVerb或BindVerb时，这两个策略返回明确的错误，
而不是默认放行所有节点或假装绑定成功。
"""
from scheduler_extender.policies.base import Binder, Predicate, PolicyUnsupportedError
from scheduler_extender.schemas.common import Node, Pod

FILTER_UNSUPPORTED_MESSAGE = (
    "This extender doesn't support Filter.  "
    "Please make 'FilterVerb' be empty in your ExtenderConfig."
)
BIND_UNSUPPORTED_MESSAGE = (
    "This extender doesn't support Bind.  "
    "Please make 'BindVerb' be empty in your ExtenderConfig."
)


class UnsupportedPredicate(Predicate):
    """对每个节点都返回不支持过滤的错误"""

    name = "unsupported"

    def check(self, pod: Pod, node: Node) -> bool:
        raise PolicyUnsupportedError(FILTER_UNSUPPORTED_MESSAGE)


class UnsupportedBinder(Binder):
    """始终返回不支持绑定的错误"""

    name = "unsupported"

    def bind(self, pod_name: str, pod_namespace: str, pod_uid: str, node: str) -> None:
        raise PolicyUnsupportedError(BIND_UNSUPPORTED_MESSAGE)

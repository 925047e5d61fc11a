"""节点绑定服务模块"""
from loguru import logger

from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.policies.unsupported import UnsupportedBinder
from scheduler_extender.schemas.bind import BindRequest


class BindService:
    """节点绑定服务类"""

    def __init__(self, registry: PolicyRegistry):
        self.registry = registry
        self.binder = registry.binder or UnsupportedBinder()

    def bind_pod_to_node(self, request: BindRequest) -> str:
        """
        将Pod绑定到指定节点

        Args:
            request: 绑定请求，包含Pod和目标节点信息

        Returns:
            str: 如果绑定失败，返回错误信息；如果成功，返回空字符串
        """
        logger.info(f"开始将Pod {request.pod_namespace}/{request.pod_name} 绑定到节点 {request.node}")
        try:
            self.binder.bind(request.pod_name, request.pod_namespace, request.pod_uid, request.node)
        except Exception as e:
            error_msg = str(e)
            logger.warning(f"绑定策略 {self.binder.name} 绑定Pod {request.pod_name} 失败: {error_msg}")
            return error_msg

        logger.info(f"Pod {request.pod_name} 成功绑定到节点 {request.node}")
        return ""

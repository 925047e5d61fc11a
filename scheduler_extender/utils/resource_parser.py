"""资源解析工具"""
import math
from typing import TYPE_CHECKING, Mapping, Union

from kubernetes.utils import parse_quantity
from loguru import logger

if TYPE_CHECKING:
    from scheduler_extender.schemas.common import Container, Pod


def parse_quantity_milli(value: Union[str, int, float]) -> int:
    """将Kubernetes资源数量解析为毫单位整数

    与Kubernetes Quantity.MilliValue()一致，不足1毫单位的部分向上取整。

    Args:
        value: 资源数量，例如 "200m"、"2"、"1Gi" 或数字

    Returns:
        int: 资源数量*1000

    Raises:
        ValueError: 资源数量格式无效
    """
    if isinstance(value, bool):
        raise ValueError(f"无效的资源数量: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        return int(math.ceil(parse_quantity(value) * 1000))
    except (ArithmeticError, TypeError) as e:
        raise ValueError(f"无效的资源数量: {value!r}") from e


def resource_milli(resources: Mapping[str, Union[str, int, float]], resource: str) -> int:
    """获取资源列表中指定资源的毫单位数量，不存在时返回0"""
    if resource not in resources:
        return 0
    return parse_quantity_milli(resources[resource])


def container_requests_resource(container: "Container", resource: str) -> bool:
    """判断容器的requests或limits中是否声明了正数量的指定资源"""
    requirements = container.resources
    for resources in (requirements.requests, requirements.limits):
        if resource_milli(resources, resource) > 0:
            return True
    return False


def pod_requests_resource(pod: "Pod", resource: str) -> bool:
    """判断Pod是否请求了指定资源

    依次检查init容器和普通容器，任一容器的requests或limits中
    该资源数量大于0即返回True。

    Args:
        pod: Pod信息
        resource: 资源名称，例如 "intel.com/foo"

    Returns:
        bool: 是否请求了该资源
    """
    for container in pod.spec.init_containers:
        if container_requests_resource(container, resource):
            logger.trace(f"init容器 {container.name} 请求了资源 {resource}")
            return True
    for container in pod.spec.containers:
        if container_requests_resource(container, resource):
            logger.trace(f"容器 {container.name} 请求了资源 {resource}")
            return True
    return False

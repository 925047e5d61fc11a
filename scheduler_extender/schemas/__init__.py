"""
数据模型模块
"""
from scheduler_extender.schemas.common import (
    ResourceRequirements, Container, PodMetadata, PodSpec, Pod,
    NodeMetadata, NodeStatus, Node, NodeList
)
from scheduler_extender.schemas.filter import ExtenderArgs, FilterRequest, FilterResult
from scheduler_extender.schemas.priority import PriorityRequest, HostPriority, HostPriorityList
from scheduler_extender.schemas.bind import BindRequest, BindResponse

__all__ = [
    # Common models
    'ResourceRequirements', 'Container', 'PodMetadata', 'PodSpec', 'Pod',
    'NodeMetadata', 'NodeStatus', 'Node', 'NodeList',

    # Filter models
    'ExtenderArgs', 'FilterRequest', 'FilterResult',

    # Priority models
    'PriorityRequest', 'HostPriority', 'HostPriorityList',

    # Bind models
    'BindRequest', 'BindResponse',
]

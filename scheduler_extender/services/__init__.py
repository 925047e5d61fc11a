"""
业务服务模块
"""
from scheduler_extender.services.filter_service import FilterService
from scheduler_extender.services.priority_service import PriorityService
from scheduler_extender.services.bind_service import BindService

__all__ = [
    'FilterService',
    'PriorityService',
    'BindService',
]

"""应用状态管理模块

策略注册表和各服务实例在应用创建时构建一次，保存在app.state上，
通过FastAPI依赖注入交给路由使用。请求处理期间不再修改。
"""
from typing import Optional

from fastapi import FastAPI, Request
from loguru import logger

from scheduler_extender.core.config import Settings
from scheduler_extender.policies.registry import PolicyRegistry
from scheduler_extender.policies.res_pack import ResourcePackScorer
from scheduler_extender.policies.unsupported import UnsupportedBinder, UnsupportedPredicate
from scheduler_extender.services.bind_service import BindService
from scheduler_extender.services.filter_service import FilterService
from scheduler_extender.services.priority_service import PriorityService


def build_policy_registry(settings: Settings) -> PolicyRegistry:
    """按配置注册默认策略

    Args:
        settings: 应用配置

    Returns:
        PolicyRegistry: 已冻结的策略注册表
    """
    registry = PolicyRegistry()
    registry.register_predicate(UnsupportedPredicate())
    registry.register_scorer(ResourcePackScorer(settings.SCARCE_RESOURCE, settings.MAX_PRIORITY))
    registry.set_binder(UnsupportedBinder())
    logger.info(f"res-pack策略稀缺资源: {settings.SCARCE_RESOURCE}, 最高得分: {settings.MAX_PRIORITY}")
    return registry.freeze()


def init_app_state(app: FastAPI, settings: Settings, registry: Optional[PolicyRegistry] = None) -> None:
    """
    初始化应用状态

    Args:
        app: FastAPI应用实例
        settings: 应用配置
        registry: 策略注册表，默认按配置构建
    """
    if registry is None:
        registry = build_policy_registry(settings)
    elif not registry.frozen:
        registry.freeze()

    app.state.settings = settings
    app.state.policy_registry = registry
    app.state.filter_service = FilterService(registry)
    app.state.priority_service = PriorityService(registry)
    app.state.bind_service = BindService(registry)
    logger.info(
        f"策略注册完成: 过滤={registry.predicate_names}, 打分={registry.scorer_names}, "
        f"绑定={registry.binder.name if registry.binder else None}"
    )


def get_settings(request: Request) -> Settings:
    """获取应用配置"""
    return request.app.state.settings


def get_policy_registry(request: Request) -> PolicyRegistry:
    """获取策略注册表"""
    return request.app.state.policy_registry


def get_filter_service(request: Request) -> FilterService:
    """获取节点过滤服务实例"""
    return request.app.state.filter_service


def get_priority_service(request: Request) -> PriorityService:
    """获取节点打分服务实例"""
    return request.app.state.priority_service


def get_bind_service(request: Request) -> BindService:
    """获取节点绑定服务实例"""
    return request.app.state.bind_service

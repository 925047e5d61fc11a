"""调度策略注册表"""
from typing import Dict, List, Optional, Tuple

from loguru import logger

from scheduler_extender.policies.base import Binder, Predicate, Scorer


class PolicyRegistry:
    """调度策略注册表

    每个过滤路由对应一个过滤策略，路由名即策略名；打分策略按注册顺序保存；
    绑定策略全局最多一个。启动完成后调用freeze()，之后只读，无需加锁。
    """

    def __init__(self):
        self._predicates: Dict[str, Predicate] = {}
        self._scorers: List[Scorer] = []
        self._binder: Optional[Binder] = None
        self._frozen = False

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("策略注册表已冻结，不能在请求处理期间注册策略")

    def register_predicate(self, predicate: Predicate) -> None:
        self._ensure_mutable()
        if not predicate.name:
            raise ValueError("过滤策略必须有名称")
        if predicate.name in self._predicates:
            raise ValueError(f"过滤策略 '{predicate.name}' 已注册")
        self._predicates[predicate.name] = predicate
        logger.info(f"注册过滤策略: {predicate.name}")

    def register_scorer(self, scorer: Scorer) -> None:
        self._ensure_mutable()
        if not scorer.name:
            raise ValueError("打分策略必须有名称")
        if self.get_scorer(scorer.name) is not None:
            raise ValueError(f"打分策略 '{scorer.name}' 已注册")
        self._scorers.append(scorer)
        logger.info(f"注册打分策略: {scorer.name}")

    def set_binder(self, binder: Binder) -> None:
        self._ensure_mutable()
        if self._binder is not None:
            raise ValueError(f"绑定策略 '{self._binder.name}' 已注册，最多只能有一个绑定策略")
        self._binder = binder
        logger.info(f"注册绑定策略: {binder.name}")

    def freeze(self) -> "PolicyRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_predicate(self, name: str) -> Optional[Predicate]:
        return self._predicates.get(name)

    def get_scorer(self, name: str) -> Optional[Scorer]:
        return next((scorer for scorer in self._scorers if scorer.name == name), None)

    @property
    def scorers(self) -> Tuple[Scorer, ...]:
        return tuple(self._scorers)

    @property
    def binder(self) -> Optional[Binder]:
        return self._binder

    @property
    def predicate_names(self) -> List[str]:
        return list(self._predicates)

    @property
    def scorer_names(self) -> List[str]:
        return [scorer.name for scorer in self._scorers]

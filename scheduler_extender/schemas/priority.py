"""优先级相关的数据模型"""
from typing import List
from pydantic import AliasChoices, BaseModel, Field

from scheduler_extender.schemas.filter import ExtenderArgs

# 打分请求与过滤请求结构相同
PriorityRequest = ExtenderArgs


class HostPriority(BaseModel):
    """主机优先级信息，符合调度器HostPriority格式"""
    host: str = Field(
        ...,
        description="节点主机名",
        validation_alias=AliasChoices("Host", "host"),
        serialization_alias="Host",
    )
    score: int = Field(
        ...,
        description="节点得分",
        validation_alias=AliasChoices("Score", "score"),
        serialization_alias="Score",
    )

    model_config = {"populate_by_name": True}


HostPriorityList = List[HostPriority]

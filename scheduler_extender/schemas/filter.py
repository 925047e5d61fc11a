"""节点过滤数据模型"""
from typing import Dict, List, Optional
from pydantic import AliasChoices, BaseModel, Field

from scheduler_extender.schemas.common import Pod, Node, NodeList


class ExtenderArgs(BaseModel):
    """调度扩展器请求参数

    过滤和打分接口共用。节点缓存模式下调度器只发送NodeNames。
    """
    pod: Pod = Field(..., validation_alias=AliasChoices("Pod", "pod"))
    nodes: Optional[NodeList] = Field(None, validation_alias=AliasChoices("Nodes", "nodes"))
    node_names: Optional[List[str]] = Field(
        None, validation_alias=AliasChoices("NodeNames", "nodenames", "nodeNames")
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Pod": {},
                "Nodes": {"items": []},
                "NodeNames": None
            }
        }
    }

    def candidate_nodes(self) -> List[Node]:
        """返回去重后的候选节点，保持请求中的顺序"""
        if self.nodes is not None:
            nodes = self.nodes.items
        elif self.node_names is not None:
            nodes = [Node.from_name(name) for name in self.node_names]
        else:
            nodes = []

        seen = set()
        candidates = []
        for node in nodes:
            if node.name in seen:
                continue
            seen.add(node.name)
            candidates.append(node)
        return candidates


# 过滤请求与打分请求结构相同
FilterRequest = ExtenderArgs


class FilterResult(BaseModel):
    """过滤结果，符合调度器ExtenderFilterResult格式"""
    nodes: Optional[NodeList] = Field(None, alias="Nodes")
    node_names: Optional[List[str]] = Field(None, alias="NodeNames")
    failed_nodes: Dict[str, str] = Field(default_factory=dict, alias="FailedNodes")
    error: str = Field("", alias="Error")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Nodes": {"items": []},
                "NodeNames": None,
                "FailedNodes": {},
                "Error": ""
            }
        }
    }

"""通用数据模型

Pod与节点的Kubernetes JSON表示，只保留调度扩展器需要解析的字段。
"""
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_serializer

from scheduler_extender.utils.resource_parser import parse_quantity_milli

# 资源数量，例如 "100m"、"2"、"1Gi" 或数字
Quantity = Union[str, int, float]


def _validate_resource_list(value: Optional[Dict[str, Quantity]]) -> Dict[str, Quantity]:
    """校验资源列表中的每个数量都可以被解析"""
    if value is None:
        return {}
    for name, quantity in value.items():
        try:
            parse_quantity_milli(quantity)
        except ValueError as e:
            raise ValueError(f"资源 {name} 的数量 {quantity!r} 无效: {e}") from e
    return value


class ResourceRequirements(BaseModel):
    """容器资源配置"""
    requests: Dict[str, Quantity] = Field(default_factory=dict, description="资源请求")
    limits: Dict[str, Quantity] = Field(default_factory=dict, description="资源限制")

    @field_validator("requests", "limits", mode="before")
    @classmethod
    def check_quantities(cls, value):
        return _validate_resource_list(value)

    model_config = {
        "json_schema_extra": {
            "example": {
                "requests": {
                    "cpu": "100m",
                    "intel.com/foo": "1"
                },
                "limits": {
                    "intel.com/foo": "1"
                }
            }
        }
    }


class Container(BaseModel):
    """容器规格"""
    name: str
    image: Optional[str] = None
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)

    @field_validator("resources", mode="before")
    @classmethod
    def default_resources(cls, value):
        return {} if value is None else value


class PodMetadata(BaseModel):
    """Pod元数据"""
    name: str = ""
    namespace: Optional[str] = "default"
    uid: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None


class PodSpec(BaseModel):
    """Pod规格"""
    init_containers: List[Container] = Field(default_factory=list, alias="initContainers")
    containers: List[Container] = Field(default_factory=list)
    node_name: Optional[str] = Field(None, alias="nodeName", description="指定容器被调度到的节点")

    model_config = {"populate_by_name": True}

    @field_validator("init_containers", "containers", mode="before")
    @classmethod
    def default_containers(cls, value):
        return [] if value is None else value


class Pod(BaseModel):
    """Pod信息"""
    metadata: PodMetadata = Field(default_factory=PodMetadata)
    spec: PodSpec = Field(default_factory=PodSpec)

    model_config = {
        "json_schema_extra": {
            "example": {
                "metadata": {
                    "name": "example-pod",
                    "namespace": "default",
                    "uid": "12345678-1234-1234-1234-123456789012"
                },
                "spec": {
                    "containers": [
                        {
                            "name": "container-1",
                            "image": "nginx:latest",
                            "resources": {
                                "requests": {
                                    "cpu": "100m",
                                    "intel.com/foo": "1"
                                }
                            }
                        }
                    ]
                }
            }
        }
    }


class EchoedModel(BaseModel):
    """按原样回传的节点模型

    过滤结果会把可调度节点回传给调度器，序列化时只输出请求中出现过的字段，
    默认值不会写回节点描述。
    """

    model_config = {"extra": "allow"}

    @model_serializer(mode="wrap")
    def dump_as_sent(self, handler):
        data = handler(self)
        sent = set(self.model_fields_set) | set(self.model_extra or {})
        return {key: value for key, value in data.items() if key in sent}


class NodeMetadata(EchoedModel):
    """节点元数据"""
    name: str
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)


class NodeStatus(EchoedModel):
    """节点资源状态

    allocated 为节点上已被占用的资源量，由请求方提供。
    """
    capacity: Dict[str, Quantity] = Field(default_factory=dict, description="节点容量")
    allocatable: Dict[str, Quantity] = Field(default_factory=dict, description="可分配资源")
    allocated: Dict[str, Quantity] = Field(default_factory=dict, description="已分配资源")

    @field_validator("capacity", "allocatable", "allocated", mode="before")
    @classmethod
    def check_quantities(cls, value):
        return _validate_resource_list(value)


class Node(EchoedModel):
    """节点信息"""
    metadata: NodeMetadata
    status: NodeStatus = Field(default_factory=NodeStatus)

    model_config = {
        "extra": "allow",
        "json_schema_extra": {
            "example": {
                "metadata": {
                    "name": "node-1",
                    "labels": {
                        "kubernetes.io/os": "linux"
                    }
                },
                "status": {
                    "capacity": {"cpu": "4", "intel.com/foo": "8"},
                    "allocatable": {"cpu": "3800m", "intel.com/foo": "8"},
                    "allocated": {"intel.com/foo": "2"}
                }
            }
        }
    }

    @property
    def name(self) -> str:
        return self.metadata.name

    @classmethod
    def from_name(cls, name: str) -> "Node":
        """只有节点名时构造节点描述"""
        return cls(metadata=NodeMetadata(name=name))

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return {} if value is None else value


class NodeList(BaseModel):
    """节点列表"""
    items: List[Node] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    @field_validator("items", mode="before")
    @classmethod
    def default_items(cls, value):
        return [] if value is None else value

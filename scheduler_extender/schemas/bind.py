"""节点绑定模型模块"""
from pydantic import AliasChoices, BaseModel, Field


class BindRequest(BaseModel):
    """
    节点绑定请求模型

    用于将Pod绑定到特定节点上的请求，符合调度器ExtenderBindingArgs格式
    """
    pod_name: str = Field(..., description="容器名", validation_alias=AliasChoices("PodName", "podName"))
    pod_namespace: str = Field(
        ..., description="容器命名空间", validation_alias=AliasChoices("PodNamespace", "podNamespace")
    )
    pod_uid: str = Field(..., description="容器标识", validation_alias=AliasChoices("PodUID", "podUID"))
    node: str = Field(..., description="节点名", validation_alias=AliasChoices("Node", "node"))

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "PodName": "example-pod",
                "PodNamespace": "default",
                "PodUID": "12345678-1234-1234-1234-123456789012",
                "Node": "worker-node-1"
            }
        }
    }


class BindResponse(BaseModel):
    """
    节点绑定响应模型

    error 为空字符串表示绑定成功
    """
    error: str = Field("", description="错误信息", alias="Error")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "Error": ""
            }
        }
    }

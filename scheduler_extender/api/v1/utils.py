"""API工具函数"""
from typing import Type, TypeVar

from fastapi import HTTPException, Request
from loguru import logger
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

EMPTY_BODY_MESSAGE = "Please send a request body"


class RequestDecodeError(Exception):
    """请求体无法解析为调度器约定的结构"""


async def read_body(request: Request) -> bytes:
    """读取请求体

    Raises:
        HTTPException: 请求体为空时返回400
    """
    body = await request.body()
    if not body.strip():
        logger.warning(f"{request.url.path} 收到空请求体")
        raise HTTPException(status_code=400, detail=EMPTY_BODY_MESSAGE)
    return body


def decode_body(body: bytes, model: Type[ModelT]) -> ModelT:
    """将请求体解析为数据模型

    Args:
        body: 原始请求体
        model: 目标数据模型

    Returns:
        解析后的数据模型实例

    Raises:
        RequestDecodeError: JSON格式错误或字段不符合模型定义
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise RequestDecodeError(f"无法解析{model.__name__}: {e}") from e

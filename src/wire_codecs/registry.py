"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: registry.py
@DateTime: 2026-10-19
@Docs: Built-in schemas and name-based lookup.
内置 schema 与按名称查找。
"""

import logging
from datetime import datetime
from typing import Annotated, Any

from pydantic import AnyUrl, Field

from wire_codecs.codecs import (
    BASE64,
    BASE64URL,
    HEX,
    BigIntCodec,
    IntCodec,
    IsoDatetimeCodec,
    NumberCodec,
    QueryStringDictCodec,
    QueryStringPairsCodec,
    UnixSecondsCodec,
    UrlCodec,
)
from wire_codecs.codecs.builtins import MAX_SAFE_INTEGER
from wire_codecs.exceptions import CodecError
from wire_codecs.schema import CodecSchema

logger = logging.getLogger(__name__)

SafeInt = Annotated[int, Field(ge=-MAX_SAFE_INTEGER, le=MAX_SAFE_INTEGER)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

base64_to_bytes: CodecSchema[str, bytes] = CodecSchema(BASE64, bytes)
base64url_to_bytes: CodecSchema[str, bytes] = CodecSchema(BASE64URL, bytes)
hex_to_bytes: CodecSchema[str, bytes] = CodecSchema(HEX, bytes)
iso_datetime_to_datetime: CodecSchema[str, datetime] = CodecSchema(
    IsoDatetimeCodec(), datetime, wire_json_schema={"type": "string", "format": "date-time"}
)
unix_seconds_to_datetime: CodecSchema[float, datetime] = CodecSchema(
    UnixSecondsCodec(), datetime, wire_json_schema={"type": "number"}
)
string_to_int: CodecSchema[str, int] = CodecSchema(IntCodec(), SafeInt)
string_to_number: CodecSchema[str, float] = CodecSchema(NumberCodec(), FiniteFloat)
string_to_bigint: CodecSchema[str, int] = CodecSchema(BigIntCodec(), int)
string_to_url: CodecSchema[str, AnyUrl] = CodecSchema(
    UrlCodec(), AnyUrl, wire_json_schema={"type": "string", "format": "uri"}
)
query_string_to_dict: CodecSchema[str, dict[str, str]] = CodecSchema(QueryStringDictCodec(), dict[str, str])
query_string_to_pairs: CodecSchema[str, list[tuple[str, str]]] = CodecSchema(
    QueryStringPairsCodec(), list[tuple[str, str]]
)

_REGISTRY: dict[str, CodecSchema[Any, Any]] = {
    schema.name: schema
    for schema in (
        base64_to_bytes,
        base64url_to_bytes,
        hex_to_bytes,
        iso_datetime_to_datetime,
        unix_seconds_to_datetime,
        string_to_int,
        string_to_number,
        string_to_bigint,
        string_to_url,
        query_string_to_dict,
        query_string_to_pairs,
    )
}


def available_schemas() -> list[str]:
    """Return registered schema names in sorted order.
    返回已注册的 schema 名称（排序后）。
    """
    return sorted(_REGISTRY)


def get_schema(name: str) -> CodecSchema[Any, Any]:
    """Look up a registered schema by name.
    按名称查找已注册的 schema。

    Args:
        name: Schema name.
            schema 名称。

    Returns:
        CodecSchema: The registered schema.
            已注册的 schema。

    Raises:
        CodecError: If no schema is registered under `name`.
            名称未注册时抛出。
    """
    key = str(name).strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise CodecError(
            message=f"Unknown codec: {name}",
            details={"available": available_schemas()},
            error_code="unknown_codec",
        ) from None


def register_schema(schema: CodecSchema[Any, Any], *, replace: bool = False) -> CodecSchema[Any, Any]:
    """Register a schema under its name.
    以 schema 名称注册 schema。

    Args:
        schema: Schema to register.
            要注册的 schema。
        replace: Whether an existing registration may be replaced.
            是否允许替换已有注册。

    Returns:
        CodecSchema: The registered schema.
            已注册的 schema。

    Raises:
        CodecError: If the name is taken and `replace` is False.
            名称已被占用且 `replace` 为 False 时抛出。
    """
    key = schema.name.strip().lower()
    if key in _REGISTRY:
        if not replace:
            raise CodecError(
                message=f"Codec already registered: {schema.name}",
                error_code="duplicate_codec",
            )
        logger.info("Replacing registered codec schema %s", key)
    _REGISTRY[key] = schema
    return schema


def unregister_schema(name: str) -> None:
    """Remove a registered schema; unknown names are ignored.
    移除已注册的 schema；未知名称会被忽略。
    """
    _REGISTRY.pop(str(name).strip().lower(), None)

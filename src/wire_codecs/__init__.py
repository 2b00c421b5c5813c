"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for wire_codecs.
wire_codecs 包导出定义。
"""

from wire_codecs.codecs import (
    BASE64,
    BASE64URL,
    HEX,
    Base64Codec,
    Base64URLCodec,
    BaseCodec,
    BigIntCodec,
    Codec,
    HexCodec,
    IntCodec,
    IsoDatetimeCodec,
    NumberCodec,
    QueryStringDictCodec,
    QueryStringPairsCodec,
    UnixSecondsCodec,
    UrlCodec,
)
from wire_codecs.config import CodecConfig, resolve_config
from wire_codecs.exceptions import CodecError, FormatError, SchemaValidationError
from wire_codecs.registry import (
    available_schemas,
    base64_to_bytes,
    base64url_to_bytes,
    get_schema,
    hex_to_bytes,
    iso_datetime_to_datetime,
    query_string_to_dict,
    query_string_to_pairs,
    register_schema,
    string_to_bigint,
    string_to_int,
    string_to_number,
    string_to_url,
    unix_seconds_to_datetime,
    unregister_schema,
)
from wire_codecs.schema import CodecSchema, ParseResult

__all__ = [
    "Codec",
    "BaseCodec",
    "Base64Codec",
    "Base64URLCodec",
    "HexCodec",
    "IsoDatetimeCodec",
    "UnixSecondsCodec",
    "IntCodec",
    "BigIntCodec",
    "NumberCodec",
    "UrlCodec",
    "QueryStringDictCodec",
    "QueryStringPairsCodec",
    "BASE64",
    "BASE64URL",
    "HEX",
    "CodecError",
    "FormatError",
    "SchemaValidationError",
    "CodecConfig",
    "resolve_config",
    "CodecSchema",
    "ParseResult",
    "base64_to_bytes",
    "base64url_to_bytes",
    "hex_to_bytes",
    "iso_datetime_to_datetime",
    "unix_seconds_to_datetime",
    "string_to_int",
    "string_to_number",
    "string_to_bigint",
    "string_to_url",
    "query_string_to_dict",
    "query_string_to_pairs",
    "available_schemas",
    "get_schema",
    "register_schema",
    "unregister_schema",
]

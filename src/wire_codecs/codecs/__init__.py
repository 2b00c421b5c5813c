"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Codecs for decoding/encoding wire values.
线上值编解码器。
"""

from wire_codecs.codecs.base import BaseCodec, Codec
from wire_codecs.codecs.binary import BASE64, BASE64URL, HEX, Base64Codec, Base64URLCodec, HexCodec
from wire_codecs.codecs.builtins import (
    BigIntCodec,
    IntCodec,
    IsoDatetimeCodec,
    NumberCodec,
    PatternCodec,
    QueryStringDictCodec,
    QueryStringPairsCodec,
    UnixSecondsCodec,
    UrlCodec,
)

__all__ = [
    "BASE64",
    "BASE64URL",
    "HEX",
    "Base64Codec",
    "Base64URLCodec",
    "BaseCodec",
    "BigIntCodec",
    "Codec",
    "HexCodec",
    "IntCodec",
    "IsoDatetimeCodec",
    "NumberCodec",
    "PatternCodec",
    "QueryStringDictCodec",
    "QueryStringPairsCodec",
    "UnixSecondsCodec",
    "UrlCodec",
]

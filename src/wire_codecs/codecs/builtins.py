"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: builtins.py
@DateTime: 2026-10-19
@Docs: Built-in codecs for common scalar and query-string types.
内置常用标量与查询字符串编解码器。

These codecs gate input with a pattern and delegate the conversion to the
host parser (datetime, int/float, pydantic URL, urllib.parse).
这些编解码器先用模式校验输入，再把转换委托给宿主解析器。
"""

import math
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import ClassVar, TypeVar
from urllib.parse import parse_qsl, urlencode

from pydantic import AnyUrl, TypeAdapter

from wire_codecs.codecs.base import BaseCodec, require_str
from wire_codecs.config import ALLOWED_DATETIME_TIMESPECS, resolve_config
from wire_codecs.exceptions import FormatError

TValue = TypeVar("TValue")

MAX_SAFE_INTEGER = 2**53 - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class PatternCodec(BaseCodec[str, TValue]):
    """Codec that checks a full-match pattern before converting.
    转换前先进行整串模式匹配的编解码器。
    """

    pattern: ClassVar[re.Pattern[str]]

    def decode(self, value: str) -> TValue:
        text = require_str(value, self.name)
        match = self.pattern.fullmatch(text)
        if match is None:
            raise FormatError(
                message=f"Invalid {self.name} value: {text!r}",
                details={"pattern": self.pattern.pattern},
            )
        try:
            return self._convert(match)
        except (ValueError, OverflowError) as exc:
            raise FormatError(
                message=f"Invalid {self.name} value: {text!r} ({exc})",
                details={"reason": str(exc)},
            ) from exc

    def _convert(self, match: re.Match[str]) -> TValue:
        """Convert a pattern match into the typed value.
        将模式匹配结果转换为类型化的值。

        Raises:
            ValueError: If the host parser rejects the text.
                宿主解析器拒绝该文本时抛出。
        """
        raise NotImplementedError


class IsoDatetimeCodec(PatternCodec[datetime]):
    """Codec for ISO-8601 date-times with a mandatory UTC offset.
    带强制时区偏移的 ISO-8601 日期时间编解码器。

    Encoding renders UTC with a `Z` suffix, e.g. `2024-01-15T10:30:00.000Z`.
    编码输出 UTC 并以 `Z` 结尾。
    """

    name = "iso_datetime"
    pattern = re.compile(
        r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})T(?P<hour_minute>[0-9]{2}:[0-9]{2})"
        r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]+))?)?"
        r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
    )

    def __init__(self, timespec: str | None = None) -> None:
        if timespec is not None and timespec not in ALLOWED_DATETIME_TIMESPECS:
            raise ValueError(f"Unsupported datetime timespec: {timespec}")
        self._timespec = timespec

    @property
    def timespec(self) -> str:
        """Encode precision; falls back to the resolved configuration.
        编码精度；未显式指定时使用解析后的配置。
        """
        return self._timespec or resolve_config().datetime_timespec

    def _convert(self, match: re.Match[str]) -> datetime:
        second = match.group("second") or "00"
        # datetime carries microseconds; extra digits are truncated
        fraction = (match.group("fraction") or "")[:6].ljust(6, "0")
        offset = match.group("offset")
        if offset == "Z":
            offset = "+00:00"
        return datetime.fromisoformat(f"{match.group('date')}T{match.group('hour_minute')}:{second}.{fraction}{offset}")

    def encode(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        text = value.astimezone(UTC).isoformat(timespec=self.timespec)
        return f"{text.removesuffix('+00:00')}Z"


class UnixSecondsCodec(BaseCodec[float, datetime]):
    """Codec for Unix seconds <-> UTC datetime.
    Unix 秒数与 UTC 日期时间互转。
    """

    name = "unix_seconds"

    def decode(self, value: float) -> datetime:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FormatError(
                message=f"Invalid {self.name} input: expected a number, got {type(value).__name__}",
                error_code="invalid_type",
            )
        if not math.isfinite(value):
            raise FormatError(message=f"Invalid {self.name} value: {value!r} is not finite")
        try:
            return _EPOCH + timedelta(seconds=value)
        except OverflowError as exc:
            raise FormatError(message=f"Invalid {self.name} value: {value!r} is out of range") from exc

    def encode(self, value: datetime) -> int:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return (value - _EPOCH) // _ONE_SECOND


class IntCodec(PatternCodec[int]):
    """Codec for safe-range integer strings (|n| <= 2**53 - 1).
    安全范围整数字符串编解码器。
    """

    name = "int"
    pattern = re.compile(r"-?[0-9]+")
    bound: ClassVar[int | None] = MAX_SAFE_INTEGER

    def _in_range(self, number: int) -> bool:
        return self.bound is None or abs(number) <= self.bound

    def _convert(self, match: re.Match[str]) -> int:
        number = int(match.group(0))
        if not self._in_range(number):
            raise ValueError(f"outside the safe integer range +/-{self.bound}")
        return number

    def encode(self, value: int) -> str:
        if not self._in_range(value):
            raise FormatError(
                message=f"Cannot encode {value} as {self.name}: outside the safe integer range +/-{self.bound}",
                details={"max_abs": self.bound},
                error_code="invalid_value",
            )
        return str(value)


class BigIntCodec(IntCodec):
    """Codec for arbitrary-precision integer strings.
    任意精度整数字符串编解码器。
    """

    name = "bigint"
    bound = None


class NumberCodec(PatternCodec[float]):
    """Codec for plain decimal number strings (no exponent, no sign other than `-`).
    十进制数字字符串编解码器。

    Encoding always renders fixed-point text, so `1e-07` becomes `0.0000001`.
    编码始终输出定点形式，例如 `1e-07` 输出为 `0.0000001`。
    """

    name = "number"
    pattern = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

    def _convert(self, match: re.Match[str]) -> float:
        return float(match.group(0))

    def encode(self, value: float) -> str:
        if isinstance(value, int):
            return str(value)
        if not math.isfinite(value):
            raise FormatError(
                message=f"Cannot encode {value!r} as {self.name}: not a finite number",
                error_code="invalid_value",
            )
        if value.is_integer():
            return str(int(value))
        text = repr(value)
        if "e" in text:
            # shortest round-tripping digits, written out in fixed-point form
            text = format(Decimal(text), "f")
        return text


class UrlCodec(BaseCodec[str, AnyUrl]):
    """Codec for absolute URLs, parsed by pydantic.
    绝对 URL 编解码器（由 pydantic 解析）。
    """

    name = "url"

    def decode(self, value: str) -> AnyUrl:
        text = require_str(value, self.name)
        if not text.strip():
            raise FormatError(message=f"Invalid {self.name} value: empty string")
        try:
            return _URL_ADAPTER.validate_python(text)
        except ValueError as exc:
            raise FormatError(
                message=f"Invalid {self.name} value: {text!r}",
                details={"reason": str(exc)},
            ) from exc

    def encode(self, value: AnyUrl) -> str:
        return str(value)


_QUERY_PATTERN = re.compile(r"(?:[^=&]+=[^&]*(?:&[^=&]+=[^&]*)*)?")


class QueryStringDictCodec(PatternCodec[dict[str, str]]):
    """Codec for form-urlencoded query strings <-> dict (last value wins).
    查询字符串与字典互转（重复键取最后一个值）。
    """

    name = "query_string"
    pattern = _QUERY_PATTERN

    def _convert(self, match: re.Match[str]) -> dict[str, str]:
        return dict(parse_qsl(match.group(0), keep_blank_values=True))

    def encode(self, value: Mapping[str, str]) -> str:
        return urlencode(list(value.items()))


class QueryStringPairsCodec(PatternCodec[list[tuple[str, str]]]):
    """Codec for form-urlencoded query strings <-> ordered pairs (duplicates kept).
    查询字符串与有序键值对互转（保留重复键）。
    """

    name = "query_string_pairs"
    pattern = _QUERY_PATTERN

    def _convert(self, match: re.Match[str]) -> list[tuple[str, str]]:
        return parse_qsl(match.group(0), keep_blank_values=True)

    def encode(self, value: Iterable[tuple[str, str]]) -> str:
        return urlencode(list(value))

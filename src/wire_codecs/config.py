"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Codec configuration helpers.
编解码配置助手。

Configuration helpers for the schema front end.
校验前端配置助手。

Environment variables / 环境变量:
        - WIRE_CODECS_MAX_INPUT_LENGTH:
            Maximum accepted input length; unset means unlimited.
            允许的最大输入长度；未设置表示不限制。
        - WIRE_CODECS_DATETIME_TIMESPEC:
            Precision used when encoding datetimes (default: milliseconds).
            编码日期时间时使用的精度（默认 milliseconds）。

Examples:
        >>> from wire_codecs.config import resolve_config
        >>> cfg = resolve_config()
        >>> cfg.datetime_timespec
        'milliseconds'

        >>> resolve_config(max_input_length=1024).max_input_length
        1024
"""

import os
from dataclasses import dataclass

DEFAULT_DATETIME_TIMESPEC = "milliseconds"
ALLOWED_DATETIME_TIMESPECS = ("seconds", "milliseconds", "microseconds")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Codec front-end configuration.

    编解码前端配置。

    Attributes:
        max_input_length: Maximum input length accepted by schemas (None = unlimited).
            校验前端允许的最大输入长度（None 表示不限制）。
        datetime_timespec: Precision used by the ISO datetime codec on encode.
            ISO 日期时间编码精度。
    """

    max_input_length: int | None = None
    datetime_timespec: str = DEFAULT_DATETIME_TIMESPEC


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_length(value: str | None) -> int | None:
    """
    Parse a positive integer length.
    解析正整数长度。

    Args:
        value: Raw text.
            原始文本。

    Returns:
        int | None: Parsed length, or None when missing/invalid/non-positive.
        int | None: 解析后的长度；缺失、非法或非正数时返回 None。
    """
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def _normalize_timespec(value: str | None) -> str | None:
    """
    Normalize a datetime timespec.
    规范化日期时间精度。

    Args:
        value: Raw timespec.
            原始精度值。

    Returns:
        str | None: Normalized timespec, or None when unsupported.
        str | None: 规范化后的精度；不支持时返回 None。
    """
    if value is None:
        return None
    item = str(value).strip().lower()
    if item in ALLOWED_DATETIME_TIMESPECS:
        return item
    return None


def resolve_config(
    *,
    max_input_length: int | None = None,
    datetime_timespec: str | None = None,
    env_prefix: str = "WIRE_CODECS",
) -> CodecConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

    Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_MAX_INPUT_LENGTH`, `{env_prefix}_DATETIME_TIMESPEC`
           环境变量
        3) defaults / 默认值

    Args:
        max_input_length: Maximum input length.
            最大输入长度。
        datetime_timespec: Datetime encode precision.
            日期时间编码精度。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 WIRE_CODECS）。

    Returns:
        A CodecConfig instance.
            返回 CodecConfig 配置实例。

    Raises:
        ValueError: If an explicit datetime_timespec is unsupported.
            显式传入的精度不受支持时抛出。
    """
    resolved_length = max_input_length
    if resolved_length is None:
        resolved_length = _parse_length(_env_get(f"{env_prefix}_MAX_INPUT_LENGTH"))

    if datetime_timespec is not None:
        resolved_spec = _normalize_timespec(datetime_timespec)
        if resolved_spec is None:
            raise ValueError(f"Unsupported datetime timespec: {datetime_timespec}")
    else:
        resolved_spec = (
            _normalize_timespec(_env_get(f"{env_prefix}_DATETIME_TIMESPEC")) or DEFAULT_DATETIME_TIMESPEC
        )

    return CodecConfig(max_input_length=resolved_length, datetime_timespec=resolved_spec)

"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_config.py
@DateTime: 2026-10-19
@Docs: Tests for config.py module.
config.py 模块测试。
"""

import os
from unittest.mock import patch

import pytest

from wire_codecs.config import (
    DEFAULT_DATETIME_TIMESPEC,
    CodecConfig,
    _env_get,
    _normalize_timespec,
    _parse_length,
    resolve_config,
)


class TestEnvGet:
    """Tests for _env_get helper.
    _env_get 辅助函数测试。
    """

    def test_returns_first_nonempty(self) -> None:
        """Return first non-empty env var / 返回第一个非空环境变量。"""
        with patch.dict(os.environ, {"A": "", "B": "hello"}):
            assert _env_get("A", "B") == "hello"

    def test_returns_none_when_all_empty(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _env_get("NONEXISTENT_1", "NONEXISTENT_2") is None

    def test_strips_whitespace(self) -> None:
        with patch.dict(os.environ, {"X": "  val  "}):
            assert _env_get("X") == "val"


class TestParseLength:
    """Tests for _parse_length helper.
    _parse_length 辅助函数测试。
    """

    def test_none(self) -> None:
        assert _parse_length(None) is None

    def test_valid(self) -> None:
        assert _parse_length("128") == 128

    @pytest.mark.parametrize("value", ["abc", "0", "-5", "1.5"])
    def test_invalid_ignored(self, value: str) -> None:
        """Non-numeric and non-positive values ignored / 非数字或非正数被忽略。"""
        assert _parse_length(value) is None


class TestNormalizeTimespec:
    """Tests for _normalize_timespec helper.
    _normalize_timespec 辅助函数测试。
    """

    def test_case_and_whitespace(self) -> None:
        assert _normalize_timespec("  Seconds ") == "seconds"

    def test_unsupported(self) -> None:
        assert _normalize_timespec("hours") is None
        assert _normalize_timespec(None) is None


class TestResolveConfig:
    """Tests for resolve_config.
    resolve_config 测试。
    """

    def test_defaults(self) -> None:
        cfg = resolve_config()
        assert cfg == CodecConfig()
        assert cfg.max_input_length is None
        assert cfg.datetime_timespec == DEFAULT_DATETIME_TIMESPEC

    def test_env(self) -> None:
        with patch.dict(
            os.environ,
            {"WIRE_CODECS_MAX_INPUT_LENGTH": "64", "WIRE_CODECS_DATETIME_TIMESPEC": "microseconds"},
        ):
            cfg = resolve_config()
        assert cfg.max_input_length == 64
        assert cfg.datetime_timespec == "microseconds"

    def test_params_override_env(self) -> None:
        with patch.dict(
            os.environ,
            {"WIRE_CODECS_MAX_INPUT_LENGTH": "64", "WIRE_CODECS_DATETIME_TIMESPEC": "microseconds"},
        ):
            cfg = resolve_config(max_input_length=8, datetime_timespec="seconds")
        assert cfg.max_input_length == 8
        assert cfg.datetime_timespec == "seconds"

    def test_custom_prefix(self) -> None:
        with patch.dict(os.environ, {"MYAPP_MAX_INPUT_LENGTH": "10"}):
            assert resolve_config(env_prefix="MYAPP").max_input_length == 10

    def test_invalid_env_timespec_falls_back(self) -> None:
        with patch.dict(os.environ, {"WIRE_CODECS_DATETIME_TIMESPEC": "hours"}):
            assert resolve_config().datetime_timespec == DEFAULT_DATETIME_TIMESPEC

    def test_invalid_param_timespec_raises(self) -> None:
        with pytest.raises(ValueError):
            resolve_config(datetime_timespec="hours")

    def test_frozen(self) -> None:
        cfg = resolve_config()
        with pytest.raises(AttributeError):
            cfg.max_input_length = 5  # type: ignore[misc]

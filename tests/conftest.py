"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the wire-codecs test suite.
测试套件的公共 fixtures。
"""

import os

import pytest

from wire_codecs.config import CodecConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove WIRE_CODECS_* variables so defaults apply.
    移除 WIRE_CODECS_* 环境变量，确保使用默认值。
    """
    for name in list(os.environ):
        if name.startswith("WIRE_CODECS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def strict_config() -> CodecConfig:
    """A CodecConfig with a small input limit and second precision.
    输入上限较小且精度为秒的 CodecConfig。
    """
    return CodecConfig(max_input_length=16, datetime_timespec="seconds")

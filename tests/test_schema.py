"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_schema.py
@DateTime: 2026-10-19
@Docs: Tests for the CodecSchema front end.
CodecSchema 校验前端测试。
"""

import json
import math
import os
from datetime import UTC, datetime
from typing import Annotated
from unittest.mock import patch

import pytest
from pydantic import AnyUrl, BaseModel
from pydantic import ValidationError as PydanticValidationError

from wire_codecs import (
    CodecConfig,
    CodecSchema,
    ParseResult,
    SchemaValidationError,
    base64_to_bytes,
    base64url_to_bytes,
    hex_to_bytes,
    iso_datetime_to_datetime,
    query_string_to_dict,
    string_to_bigint,
    string_to_int,
    string_to_number,
    string_to_url,
    unix_seconds_to_datetime,
)
from wire_codecs.codecs import HEX, HexCodec, IntCodec


class Envelope(BaseModel):
    payload: Annotated[bytes, base64url_to_bytes]
    digest: Annotated[bytes, hex_to_bytes]
    sent_at: Annotated[datetime, iso_datetime_to_datetime]


class TestParse:
    """Tests for CodecSchema.parse.
    CodecSchema.parse 测试。
    """

    def test_parse_success(self) -> None:
        assert base64_to_bytes.parse("SGVsbG8=") == b"Hello"
        assert base64url_to_bytes.parse("AAEC_w") == bytes([0, 1, 2, 255])
        assert hex_to_bytes.parse("48656c6c6f") == b"Hello"
        assert string_to_int.parse("42") == 42

    def test_parse_failure_collects_issue(self) -> None:
        """Decode failures become issues with position details / 解码失败转为带位置的问题项。"""
        with pytest.raises(SchemaValidationError) as exc_info:
            hex_to_bytes.parse("0g")
        exc = exc_info.value
        assert exc.error_code == "validation_error"
        assert exc.message.startswith("hex: ")
        assert len(exc.issues) == 1
        issue = exc.issues[0]
        assert issue["code"] == "invalid_format"
        assert issue["input"] == "0g"
        assert issue["details"] == {"position": 1, "character": "g"}

    def test_wrong_input_type(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            base64_to_bytes.parse(123)
        assert exc_info.value.issues[0]["code"] == "invalid_type"

    def test_unix_seconds_requires_number(self) -> None:
        assert unix_seconds_to_datetime.parse(0) == datetime(1970, 1, 1, tzinfo=UTC)
        with pytest.raises(SchemaValidationError):
            unix_seconds_to_datetime.parse("0")

    def test_url(self) -> None:
        url = string_to_url.parse("https://example.com")
        assert isinstance(url, AnyUrl)
        assert string_to_url.encode(url) == "https://example.com/"

    def test_accepts(self) -> None:
        assert base64url_to_bytes.accepts("SGVsbG8") is True
        assert base64url_to_bytes.accepts("YQ==") is False
        assert base64_to_bytes.accepts(None) is False


class TestSafeParse:
    """Tests for CodecSchema.safe_parse.
    CodecSchema.safe_parse 测试。
    """

    def test_success(self) -> None:
        result = base64_to_bytes.safe_parse("")
        assert isinstance(result, ParseResult)
        assert result.success is True
        assert result.data == b""
        assert result.error is None

    @pytest.mark.parametrize("text", ["SGVs bG8=", "SGVs\nbG8=", "Y===", "Hello!"])
    def test_failure_does_not_raise(self, text: str) -> None:
        result = base64_to_bytes.safe_parse(text)
        assert result.success is False
        assert result.data is None
        assert isinstance(result.error, SchemaValidationError)

    def test_query_string(self) -> None:
        result = query_string_to_dict.safe_parse("foo=bar&baz=qux")
        assert result.success is True
        assert result.data == {"foo": "bar", "baz": "qux"}
        assert query_string_to_dict.safe_parse("foo").success is False


class TestEncode:
    """Tests for CodecSchema.encode.
    CodecSchema.encode 测试。
    """

    def test_encode(self) -> None:
        assert base64_to_bytes.encode(bytes([0, 1, 2, 255])) == "AAEC/w=="
        assert base64url_to_bytes.encode(bytes([0, 1, 2, 255])) == "AAEC_w"
        assert hex_to_bytes.encode(bytes([0])) == "00"
        assert query_string_to_dict.encode({"foo": "bar"}) == "foo=bar"

    def test_encode_rejects_wrong_output_type(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            base64_to_bytes.encode("Hello")  # type: ignore[arg-type]
        assert exc_info.value.error_code == "invalid_value"
        assert exc_info.value.issues[0]["code"] == "invalid_value"

    def test_encode_rejects_bool_for_int(self) -> None:
        with pytest.raises(SchemaValidationError):
            string_to_int.encode(True)

    @pytest.mark.parametrize("value", [2**53, -(2**53), 2**60])
    def test_int_encode_stays_in_safe_range(self, value: int) -> None:
        """Encoded text must decode with the same schema / 编码结果必须能被同一 schema 解码。"""
        with pytest.raises(SchemaValidationError) as exc_info:
            string_to_int.encode(value)
        assert exc_info.value.error_code == "invalid_value"
        assert string_to_int.parse(string_to_int.encode(2**53 - 1)) == 2**53 - 1
        assert string_to_bigint.parse(string_to_bigint.encode(value)) == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_number_encode_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            string_to_number.encode(value)
        assert exc_info.value.error_code == "invalid_value"

    def test_number_encode_small_magnitude(self) -> None:
        encoded = string_to_number.encode(1e-7)
        assert encoded == "0.0000001"
        assert string_to_number.parse(encoded) == 1e-7

    def test_codec_refusal_becomes_validation_error(self) -> None:
        schema = CodecSchema(IntCodec(), int, name="plain_int")
        with pytest.raises(SchemaValidationError) as exc_info:
            schema.encode(2**60)
        issue = exc_info.value.issues[0]
        assert issue["code"] == "invalid_value"
        assert issue["details"] == {"max_abs": 2**53 - 1}


class CountingHexCodec(HexCodec):
    def __init__(self) -> None:
        self.calls = 0

    def decode(self, value: str) -> bytes:
        self.calls += 1
        return super().decode(value)


class TestSingleDecode:
    """Each parse decodes its input exactly once.
    每次解析只解码一次输入。
    """

    @pytest.mark.parametrize("text", ["00ff", "0g", "abc"])
    def test_parse_decodes_once(self, text: str) -> None:
        codec = CountingHexCodec()
        CodecSchema(codec, bytes).safe_parse(text)
        assert codec.calls == 1

    def test_too_long_input_not_decoded(self) -> None:
        codec = CountingHexCodec()
        schema = CodecSchema(codec, bytes, config=CodecConfig(max_input_length=2))
        assert schema.accepts("0000") is False
        assert codec.calls == 0


class TestMaxInputLength:
    """Tests for the configured input length limit.
    输入长度上限测试。
    """

    def test_explicit_config(self) -> None:
        schema = CodecSchema(HEX, bytes, name="short_hex", config=CodecConfig(max_input_length=4))
        assert schema.parse("00ff") == b"\x00\xff"
        with pytest.raises(SchemaValidationError) as exc_info:
            schema.parse("0000ff")
        issue = exc_info.value.issues[0]
        assert issue["code"] == "too_long"
        assert issue["details"] == {"length": 6, "max_length": 4}

    def test_environment_config(self) -> None:
        with patch.dict(os.environ, {"WIRE_CODECS_MAX_INPUT_LENGTH": "2"}):
            assert hex_to_bytes.safe_parse("0000").success is False
        assert hex_to_bytes.safe_parse("0000").success is True


class TestPydanticIntegration:
    """Tests for using schemas as pydantic field metadata.
    作为 pydantic 字段元数据使用的测试。
    """

    def test_validate_and_dump(self) -> None:
        env = Envelope.model_validate({"payload": "AAEC_w", "digest": "FF", "sent_at": "2024-01-15T10:30:00Z"})
        assert env.payload == bytes([0, 1, 2, 255])
        assert env.digest == b"\xff"
        assert env.sent_at == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        assert env.model_dump() == {
            "payload": "AAEC_w",
            "digest": "ff",
            "sent_at": "2024-01-15T10:30:00.000Z",
        }

    def test_json_round_trip(self) -> None:
        env = Envelope.model_validate({"payload": "SGVsbG8", "digest": "00", "sent_at": "2024-01-15T10:30:00Z"})
        raw = env.model_dump_json()
        assert json.loads(raw)["payload"] == "SGVsbG8"
        assert Envelope.model_validate_json(raw) == env

    def test_invalid_field(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Envelope.model_validate({"payload": "YQ==", "digest": "00", "sent_at": "2024-01-15T10:30:00Z"})
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "codec_format"
        assert errors[0]["loc"] == ("payload",)
        assert errors[0]["msg"].startswith("base64url: ")

    def test_json_schema(self) -> None:
        props = Envelope.model_json_schema()["properties"]
        assert props["payload"]["type"] == "string"
        assert props["payload"]["format"] == "base64url"
        assert props["sent_at"]["format"] == "date-time"

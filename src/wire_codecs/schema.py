"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: schema.py
@DateTime: 2026-10-19
@Docs: Validation front end binding a codec to input/output shape checks.
将编解码器与输入/输出形状校验绑定的校验前端。

A CodecSchema applies the input length limit, decodes once (a decode failure
is the rejection), then checks the decoded value against the declared output
type with a strict pydantic TypeAdapter. It offers two query modes:
CodecSchema 先应用输入长度上限并解码一次（解码失败即为拒绝），再用严格模式的
pydantic TypeAdapter 校验输出类型。提供两种查询模式：
- parse: raise SchemaValidationError on failure.
    parse：失败时抛出 SchemaValidationError。
- safe_parse: return a ParseResult without raising.
    safe_parse：返回 ParseResult，不抛出异常。

Schemas can also be used as pydantic field metadata:
也可以作为 pydantic 字段元数据使用：

    >>> from typing import Annotated
    >>> from pydantic import BaseModel
    >>> from wire_codecs import base64_to_bytes
    >>> class Blob(BaseModel):
    ...     payload: Annotated[bytes, base64_to_bytes]
    >>> Blob.model_validate({"payload": "SGVsbG8="}).payload
    b'Hello'
    >>> Blob(payload="SGVsbG8=").model_dump()
    {'payload': 'SGVsbG8='}
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from wire_codecs.codecs.base import Codec
from wire_codecs.config import CodecConfig, resolve_config
from wire_codecs.exceptions import FormatError, SchemaValidationError

logger = logging.getLogger(__name__)

TWire = TypeVar("TWire")
TValue = TypeVar("TValue")


def _issue(
    *,
    code: str,
    message: str,
    value: Any | None = None,
    details: Any | None = None,
) -> dict[str, Any]:
    """Build an issue item.
    构建一个问题项。

    Args:
        code: Stable issue code.
            稳定问题码。
        message: Issue message.
            问题消息。
        value: Related input (optional).
            相关输入（可选）。
        details: Extra details (optional).
            详细信息（可选）。

    Returns:
        dict[str, Any]: Issue item; optional keys are omitted when None.
            问题项；可选键为 None 时省略。
    """
    item: dict[str, Any] = {"code": code, "message": message}
    if value is not None:
        item["input"] = value
    if details is not None:
        item["details"] = details
    return item


def _issue_from_error(exc: FormatError, value: Any) -> dict[str, Any]:
    details: dict[str, Any] = {}
    if exc.position is not None:
        details["position"] = exc.position
    if exc.character is not None:
        details["character"] = exc.character
    if isinstance(exc.details, dict):
        details.update(exc.details)
    return _issue(code=exc.error_code, message=exc.message, value=value, details=details or None)


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[TValue]):
    """Outcome of `CodecSchema.safe_parse`.
    `CodecSchema.safe_parse` 的结果。

    Attributes:
        success: Whether parsing succeeded.
            是否解析成功。
        data: Decoded value when successful.
            成功时的解码值。
        error: Validation error when unsuccessful.
            失败时的校验错误。
    """

    success: bool
    data: TValue | None = None
    error: SchemaValidationError | None = None


class CodecSchema(Generic[TWire, TValue]):
    """A codec bound to input/output shape checks.
    绑定输入/输出形状校验的编解码器。

    Args:
        codec: The codec providing accepts/decode/encode.
            提供 accepts/decode/encode 的编解码器。
        output: Declared output type, checked strictly by pydantic.
            声明的输出类型，由 pydantic 严格校验。
        name: Schema name (defaults to the codec name).
            schema 名称（默认使用编解码器名称）。
        config: Explicit configuration; resolved from the environment when None.
            显式配置；为 None 时从环境变量解析。
        wire_json_schema: JSON schema describing the wire form.
            描述线上形式的 JSON schema。
    """

    def __init__(
        self,
        codec: Codec[TWire, TValue],
        output: Any,
        *,
        name: str | None = None,
        config: CodecConfig | None = None,
        wire_json_schema: dict[str, Any] | None = None,
    ) -> None:
        self.codec = codec
        self.output = output
        self.name = name or codec.name
        self._config = config
        self._output_adapter: TypeAdapter[TValue] = TypeAdapter(output)
        self._wire_json_schema = wire_json_schema or {"type": "string", "format": self.name}

    @property
    def config(self) -> CodecConfig:
        return self._config or resolve_config()

    def __repr__(self) -> str:
        return f"CodecSchema(name={self.name!r}, codec={self.codec!r})"

    def accepts(self, value: object) -> bool:
        """Return whether `value` passes the input-shape check.
        判断 `value` 是否通过输入形状校验。
        """
        return self._decode_input(value)[1] is None

    def parse(self, value: object) -> TValue:
        """Decode `value`, raising on failure.
        解码 `value`，失败时抛出异常。

        Args:
            value: Wire value.
                线上值。

        Returns:
            TValue: Decoded value.
                解码后的值。

        Raises:
            SchemaValidationError: If the input or decoded value is invalid.
                输入或解码值不合法时抛出。
        """
        data, issues = self._run(value)
        if issues:
            logger.debug("Schema %s rejected input: %s", self.name, issues[0]["code"])
            raise SchemaValidationError(message=f"{self.name}: {issues[0]['message']}", issues=issues)
        return data  # type: ignore[return-value]

    def safe_parse(self, value: object) -> ParseResult[TValue]:
        """Decode `value` without raising.
        解码 `value`，不抛出异常。

        Args:
            value: Wire value.
                线上值。

        Returns:
            ParseResult[TValue]: Success flag with data or error.
                含数据或错误的结果对象。
        """
        try:
            return ParseResult(success=True, data=self.parse(value))
        except SchemaValidationError as exc:
            return ParseResult(success=False, error=exc)

    def encode(self, value: TValue) -> TWire:
        """Encode a typed value after checking it against the output type.
        校验输出类型后编码类型化的值。

        Args:
            value: Typed value.
                类型化的值。

        Returns:
            TWire: Wire representation.
                线上表示。

        Raises:
            SchemaValidationError: If `value` does not match the output type
                or the codec cannot render it.
                `value` 与输出类型不匹配或编解码器无法输出时抛出。
        """
        try:
            checked = self._output_adapter.validate_python(value, strict=True)
        except PydanticValidationError as exc:
            issues = [
                _issue(
                    code="invalid_value",
                    message=f"Cannot encode {type(value).__name__} with {self.name}",
                    details=exc.errors(include_url=False),
                )
            ]
            raise SchemaValidationError(
                message=f"{self.name}: {issues[0]['message']}", issues=issues, error_code="invalid_value"
            ) from exc
        try:
            return self.codec.encode(checked)
        except FormatError as exc:
            issue = _issue_from_error(exc, value)
            raise SchemaValidationError(
                message=f"{self.name}: {exc.message}", issues=[issue], error_code="invalid_value"
            ) from exc

    def _decode_input(self, value: object) -> tuple[Any, dict[str, Any] | None]:
        """Apply the input limit and decode once.
        应用输入长度上限并解码一次。

        Returns:
            tuple[Any, dict | None]: Decoded value, or None with the rejection issue.
                解码值；被拒绝时为 None 及对应问题项。
        """
        limit = self.config.max_input_length
        if limit is not None and isinstance(value, str) and len(value) > limit:
            return None, _issue(
                code="too_long",
                message=f"Input is {len(value)} characters long; the limit is {limit}",
                details={"length": len(value), "max_length": limit},
            )
        try:
            return self.codec.decode(value), None  # type: ignore[arg-type]
        except FormatError as exc:
            return None, _issue_from_error(exc, value)

    def _run(self, value: object) -> tuple[TValue | None, list[dict[str, Any]]]:
        decoded, issue = self._decode_input(value)
        if issue is not None:
            return None, [issue]
        try:
            data = self._output_adapter.validate_python(decoded, strict=True)
        except PydanticValidationError as exc:
            return None, [
                _issue(
                    code="invalid_output",
                    message=f"Decoded value is not a valid {self.name} output",
                    value=value,
                    details=exc.errors(include_url=False),
                )
            ]
        return data, []

    def _validate_field(self, value: Any) -> TValue:
        data, issues = self._run(value)
        if issues:
            raise PydanticCustomError(
                "codec_format",
                "{codec}: {message}",
                {"codec": self.name, "message": issues[0]["message"]},
            )
        return data  # type: ignore[return-value]

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(self.codec.encode, when_used="always"),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return dict(self._wire_json_schema)

"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Codec error hierarchy.
编解码异常体系。
"""

from typing import Any


class CodecError(Exception):
    """
    Codec Errors.
    编解码异常。

    Errors that occur while decoding, encoding or looking up codecs.
    解码、编码或查找编解码器过程中发生的异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "codec_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code


class FormatError(CodecError):
    """
    Format error raised when wire text violates a codec's grammar.
    当输入文本违反编解码语法时抛出的格式错误。

    Attributes:
        position: Zero-based index of the offending character (if any).
        position: 出错字符的下标（从 0 开始，可选）。
        character: The offending character (if any).
        character: 出错字符（可选）。
    """

    def __init__(
        self,
        *,
        message: str,
        position: int | None = None,
        character: str | None = None,
        details: Any | None = None,
        error_code: str = "invalid_format",
    ) -> None:
        super().__init__(message=message, details=details, error_code=error_code)
        self.position = position
        self.character = character


class SchemaValidationError(CodecError):
    """
    Validation error raised by the schema front end.
    校验前端抛出的校验错误。

    Attributes:
        issues: Collected issue items.
        issues: 收集到的问题列表。
    """

    def __init__(
        self,
        *,
        message: str,
        issues: list[dict[str, Any]] | None = None,
        error_code: str = "validation_error",
    ) -> None:
        super().__init__(message=message, details=issues, error_code=error_code)
        self.issues: list[dict[str, Any]] = list(issues or [])

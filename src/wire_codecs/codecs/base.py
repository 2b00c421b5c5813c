"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-10-19
@Docs: Codec protocol for decoding/encoding wire values.
线上值编解码器协议。
"""

from typing import Protocol, TypeVar

from wire_codecs.exceptions import FormatError

TWire = TypeVar("TWire")
TValue = TypeVar("TValue")


class Codec(Protocol[TWire, TValue]):
    """Codec protocol for decoding and encoding values.
    用于解码与编码值的协议。
    """

    name: str

    def accepts(self, value: object) -> bool:
        """Return whether `value` is decodable, without raising.
        判断 `value` 是否可以被解码（不抛出异常）。

        Args:
            value: The raw wire value.
                原始线上值。
        Returns:
            True when decode would succeed, otherwise False.
                decode 会成功时返回 True，否则返回 False。
        """
        ...

    def decode(self, value: TWire) -> TValue:
        """Decode a wire value into a typed value.
        将线上值解码为类型化的值。

        Args:
            value: The raw wire value to decode.
                要解码的原始线上值。
        Returns:
            The decoded value of type TValue.
                解码后的类型化值。
        Raises:
            FormatError: If the wire value violates the codec's grammar.
                线上值不符合语法时抛出。
        """
        ...

    def encode(self, value: TValue) -> TWire:
        """Encode a typed value into its wire representation.
        将类型化的值编码为线上表示。

        Args:
            value: The typed value to encode.
                要编码的类型化值。
        Returns:
            The wire representation, always accepted by `decode`.
                线上表示，总能被 `decode` 接受。
        """
        ...


class BaseCodec(Codec[TWire, TValue]):
    """Codec base whose `accepts` is derived from `decode`.
    `accepts` 由 `decode` 推导的编解码器基类。

    Acceptance and decoding share one grammar, so `accepts(t)` is True
    exactly when `decode(t)` returns.
    接受判定与解码共用同一语法：`accepts(t)` 为 True 当且仅当 `decode(t)` 成功。
    """

    name: str = "codec"

    def accepts(self, value: object) -> bool:
        try:
            self.decode(value)  # type: ignore[arg-type]
        except FormatError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


def require_str(value: object, name: str) -> str:
    """Return `value` if it is a str, otherwise raise FormatError.
    若 `value` 为 str 则返回，否则抛出 FormatError。

    Args:
        value: Raw input.
            原始输入。
        name: Codec name used in the message.
            用于错误消息的编解码器名称。

    Returns:
        str: The input text.
            输入文本。
    """
    if not isinstance(value, str):
        raise FormatError(
            message=f"Invalid {name} input: expected str, got {type(value).__name__}",
            error_code="invalid_type",
        )
    return value

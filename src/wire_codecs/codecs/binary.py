"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: binary.py
@DateTime: 2026-10-19
@Docs: Byte-level transcoding codecs (Base64, Base64URL, Hex).
字节级转码编解码器（Base64、Base64URL、Hex）。

Each decoder is a single scanner that validates and decodes in one pass,
so acceptance and decoding cannot disagree.
每个解码器都是单遍扫描器，校验与解码同时完成，因此接受判定与解码结果始终一致。

Examples:
        >>> from wire_codecs.codecs.binary import BASE64, BASE64URL, HEX
        >>> BASE64.decode("SGVsbG8=")
        b'Hello'
        >>> BASE64URL.encode(bytes([0, 1, 2, 255]))
        'AAEC_w'
        >>> HEX.encode(b"\\xff")
        'ff'
"""

from dataclasses import dataclass
from typing import TypeAlias

from wire_codecs.codecs.base import BaseCodec, require_str
from wire_codecs.exceptions import FormatError

BytesLike: TypeAlias = bytes | bytearray | memoryview

STANDARD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URLSAFE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
HEX_DIGITS = "0123456789abcdef"
PAD = "="


def _lookup_table(symbols: str, *, ignore_case: bool = False) -> tuple[int, ...]:
    """Build an ASCII-indexed symbol -> value table (-1 marks a foreign symbol).
    构建以 ASCII 码为下标的符号 -> 数值表（-1 表示非字母表符号）。

    Args:
        symbols: Alphabet in value order.
            按数值顺序排列的字母表。
        ignore_case: Also map the upper-case form of each symbol.
            是否同时映射每个符号的大写形式。

    Returns:
        tuple[int, ...]: 128-entry lookup table.
            128 项查找表。
    """
    table = [-1] * 128
    for value, symbol in enumerate(symbols):
        table[ord(symbol)] = value
        if ignore_case:
            table[ord(symbol.upper())] = value
    return tuple(table)


def _symbol_value(table: tuple[int, ...], char: str) -> int:
    code = ord(char)
    return table[code] if code < 128 else -1


def _as_bytes(value: object, name: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} encode expects a bytes-like object, got {type(value).__name__}")


@dataclass(frozen=True, slots=True)
class Base64Variant:
    """A Base64 alphabet paired with its padding policy.
    Base64 字母表及其填充策略。

    Attributes:
        name: Format name used in error messages.
            用于错误消息的格式名。
        symbols: 64 symbols in value order.
            按数值顺序排列的 64 个符号。
        table: Inverse lookup built from `symbols`.
            由 `symbols` 构建的反向查找表。
        padded: Whether `=` padding is required on input and emitted on output.
            输入是否要求 `=` 填充、输出是否生成 `=` 填充。
    """

    name: str
    symbols: str
    table: tuple[int, ...]
    padded: bool


STANDARD = Base64Variant(
    name="base64", symbols=STANDARD_ALPHABET, table=_lookup_table(STANDARD_ALPHABET), padded=True
)
URLSAFE = Base64Variant(
    name="base64url", symbols=URLSAFE_ALPHABET, table=_lookup_table(URLSAFE_ALPHABET), padded=False
)
_HEX_TABLE = _lookup_table(HEX_DIGITS, ignore_case=True)


def _padding_count(text: str, variant: Base64Variant) -> int:
    """Validate the overall length and return the number of trailing pad symbols.
    校验整体长度，并返回末尾填充符数量。
    """
    length = len(text)
    if variant.padded:
        if length % 4:
            raise FormatError(
                message=f"Invalid {variant.name} length {length}: must be a multiple of 4 including padding",
                details={"length": length},
            )
        if length and text[-1] == PAD:
            return 2 if text[-2] == PAD else 1
        return 0
    if length % 4 == 1:
        raise FormatError(
            message=f"Invalid {variant.name} length {length}: a length of 1 (mod 4) cannot encode whole bytes",
            details={"length": length},
        )
    return 0


def unpack_sextets(text: str, variant: Base64Variant) -> bytes:
    """Decode Base64-family text into bytes.
    将 Base64 系列文本解码为字节。

    Symbols are folded into an accumulator six bits at a time and a byte is
    emitted whenever eight bits are available. Bits left over after the last
    symbol must be zero, so every accepted text is the canonical encoding of
    its bytes.
    每个符号向累加器追加 6 位，凑满 8 位即输出一个字节；
    最后剩余的位必须为 0，保证被接受的文本都是其字节的规范编码。

    Args:
        text: Encoded text.
            编码文本。
        variant: Alphabet and padding policy.
            字母表与填充策略。

    Returns:
        bytes: Decoded bytes.
            解码后的字节。

    Raises:
        FormatError: On a foreign symbol, misplaced or disallowed padding,
            a bad length, or non-zero trailing bits.
            出现非法符号、填充位置或数量错误、长度错误或尾部位非零时抛出。
    """
    body_end = len(text) - _padding_count(text, variant)
    table = variant.table
    out = bytearray()
    acc = 0
    bits = 0
    for position in range(body_end):
        char = text[position]
        value = _symbol_value(table, char)
        if value < 0:
            if char == PAD:
                reason = "padding is not permitted" if not variant.padded else "padding may only end the input"
                message = f"Unexpected '=' at position {position} in {variant.name}: {reason}"
            else:
                message = f"Invalid {variant.name} character {char!r} at position {position}"
            raise FormatError(message=message, position=position, character=char)
        acc = (acc << 6) | value
        bits += 6
        if bits >= 8:
            bits -= 8
            out.append(acc >> bits)
            acc &= (1 << bits) - 1
    if acc:
        position = body_end - 1
        raise FormatError(
            message=f"Non-canonical {variant.name}: unused bits of {text[position]!r} at position {position} must be zero",
            position=position,
            character=text[position],
        )
    return bytes(out)


def pack_sextets(data: bytes, variant: Base64Variant) -> str:
    """Encode bytes as Base64-family text.
    将字节编码为 Base64 系列文本。

    Args:
        data: Bytes to encode.
            要编码的字节。
        variant: Alphabet and padding policy.
            字母表与填充策略。

    Returns:
        str: Encoded text; `=` padding is appended only for padded variants.
            编码文本；仅在需要填充的变体中追加 `=`。
    """
    symbols = variant.symbols
    size = len(data)
    whole = size - size % 3
    chunks: list[str] = []
    for i in range(0, whole, 3):
        n = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        chunks.append(symbols[n >> 18] + symbols[(n >> 12) & 63] + symbols[(n >> 6) & 63] + symbols[n & 63])
    leftover = size - whole
    if leftover == 1:
        n = data[whole] << 16
        chunks.append(symbols[n >> 18] + symbols[(n >> 12) & 63])
        if variant.padded:
            chunks.append(PAD * 2)
    elif leftover == 2:
        n = (data[whole] << 16) | (data[whole + 1] << 8)
        chunks.append(symbols[n >> 18] + symbols[(n >> 12) & 63] + symbols[(n >> 6) & 63])
        if variant.padded:
            chunks.append(PAD)
    return "".join(chunks)


class Base64Codec(BaseCodec[str, bytes]):
    """Codec for standard Base64 (RFC 4648, `+` `/`, `=` padding).
    标准 Base64 编解码器（RFC 4648，`+` `/`，`=` 填充）。
    """

    name = STANDARD.name
    variant = STANDARD

    def decode(self, value: str) -> bytes:
        return unpack_sextets(require_str(value, self.name), self.variant)

    def encode(self, value: BytesLike) -> str:
        return pack_sextets(_as_bytes(value, self.name), self.variant)


class Base64URLCodec(Base64Codec):
    """Codec for URL-safe Base64 (`-` `_`, never padded).
    URL 安全 Base64 编解码器（`-` `_`，不使用填充）。

    Missing padding is reconstructed from the input length: a remainder of
    2 or 3 (mod 4) implies two or one pad symbols; a remainder of 1 is invalid.
    缺失的填充由输入长度推导：余 2 或 3 分别相当于 2 或 1 个填充符，余 1 非法。
    """

    name = URLSAFE.name
    variant = URLSAFE


class HexCodec(BaseCodec[str, bytes]):
    """Codec for hexadecimal text.
    十六进制编解码器。

    Decoding is case-insensitive; encoding always emits lower-case pairs.
    解码不区分大小写；编码始终输出小写。
    """

    name = "hex"

    def decode(self, value: str) -> bytes:
        text = require_str(value, self.name)
        length = len(text)
        if length % 2:
            raise FormatError(
                message=f"Invalid hex length {length}: must be even",
                details={"length": length},
            )
        out = bytearray(length // 2)
        for position in range(0, length, 2):
            high = self._digit(text, position)
            low = self._digit(text, position + 1)
            out[position // 2] = (high << 4) | low
        return bytes(out)

    def encode(self, value: BytesLike) -> str:
        data = _as_bytes(value, self.name)
        return "".join(HEX_DIGITS[b >> 4] + HEX_DIGITS[b & 15] for b in data)

    @staticmethod
    def _digit(text: str, position: int) -> int:
        char = text[position]
        value = _symbol_value(_HEX_TABLE, char)
        if value < 0:
            raise FormatError(
                message=f"Invalid hex character {char!r} at position {position}",
                position=position,
                character=char,
            )
        return value


BASE64 = Base64Codec()
BASE64URL = Base64URLCodec()
HEX = HexCodec()

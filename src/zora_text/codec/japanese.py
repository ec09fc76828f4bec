"""Japanese name encoding (one byte per character, fixed table).

Used for Link and child names only; secrets use a different scheme.

Encoding folds ``a``-``z`` to upper case and looks the character up in
:data:`~zora_text.core.constants.ALPHABET`. Anything the table cannot
represent becomes byte 0, exactly like an explicit null, so callers cannot
tell "unsupported" from "null" after the fact. Decoding maps bytes below
``0x10`` to the null character.

Range arguments are bounds-checked: a bad ``start``/``count`` raises
``IndexError`` instead of reading or writing past a buffer.
"""

import logging
from typing import MutableSequence, Sequence

from zora_text.core.constants import (
    ALPHABET,
    BASE_OFFSET,
    CHAR_TO_BYTE,
    CODEC_NAME,
    NULL_BYTE,
    NULL_CHAR,
)

logger = logging.getLogger(__name__)


def _check_range(length: int, start: int, count: int, what: str) -> None:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if start < 0 or start + count > length:
        raise IndexError(
            f"{what} range [{start}, {start + count}) out of bounds (length={length})"
        )


def encode_char(char: str) -> int:
    """Encode a single character to its byte value (0 if unmapped)."""
    if 'a' <= char <= 'z':
        char = char.upper()
    if char == NULL_CHAR:
        return NULL_BYTE
    byte = CHAR_TO_BYTE.get(char)
    if byte is None:
        logger.debug("Unmapped character %r encoded as null", char)
        return NULL_BYTE
    return byte


def decode_byte(byte: int) -> str:
    """Decode a single byte value to its character (null if undefined)."""
    idx = byte - BASE_OFFSET
    if idx < 0 or idx >= len(ALPHABET):
        return NULL_CHAR
    return ALPHABET[idx]


def byte_count_for(chars: Sequence[str], start: int, count: int) -> int:
    """Number of bytes produced by encoding ``chars[start:start + count]``."""
    return count


def char_count_for(data: Sequence[int], start: int, count: int) -> int:
    """Number of characters produced by decoding ``data[start:start + count]``."""
    return count


def max_byte_count(char_count: int) -> int:
    return char_count


def max_char_count(byte_count: int) -> int:
    return byte_count


def encode_into(
    chars: Sequence[str],
    start: int,
    count: int,
    out: MutableSequence[int],
    out_start: int,
) -> int:
    """Encode ``count`` characters from ``chars[start]`` into ``out[out_start:]``.

    Returns the number of bytes written, which is always ``count``.
    """
    _check_range(len(chars), start, count, "input")
    _check_range(len(out), out_start, count, "output")
    for i in range(count):
        out[out_start + i] = encode_char(chars[start + i])
    return count


def decode_into(
    data: Sequence[int],
    start: int,
    count: int,
    out: MutableSequence[str],
    out_start: int,
) -> int:
    """Decode ``count`` bytes from ``data[start]`` into ``out[out_start:]``.

    Returns the number of characters written, which is always ``count``.
    """
    _check_range(len(data), start, count, "input")
    _check_range(len(out), out_start, count, "output")
    for i in range(count):
        out[out_start + i] = decode_byte(data[start + i])
    return count


def encode(text: str) -> bytes:
    """Encode a whole string."""
    result = bytearray(max_byte_count(len(text)))
    encode_into(text, 0, len(text), result, 0)
    return bytes(result)


def decode(data: bytes) -> str:
    """Decode a whole byte string. Null bytes are kept as ``'\\0'``."""
    result = [NULL_CHAR] * max_char_count(len(data))
    decode_into(data, 0, len(data), result, 0)
    return ''.join(result)


class JapaneseEncoding:
    """Fixed-table encoding object for Japanese names.

    Stateless; every method delegates to the module-level functions, so one
    instance can be shared freely.
    """

    name = CODEC_NAME

    def byte_count_for(self, chars: Sequence[str], start: int, count: int) -> int:
        return byte_count_for(chars, start, count)

    def char_count_for(self, data: Sequence[int], start: int, count: int) -> int:
        return char_count_for(data, start, count)

    def max_byte_count(self, char_count: int) -> int:
        return max_byte_count(char_count)

    def max_char_count(self, byte_count: int) -> int:
        return max_char_count(byte_count)

    def encode_into(
        self,
        chars: Sequence[str],
        start: int,
        count: int,
        out: MutableSequence[int],
        out_start: int,
    ) -> int:
        return encode_into(chars, start, count, out, out_start)

    def decode_into(
        self,
        data: Sequence[int],
        start: int,
        count: int,
        out: MutableSequence[str],
        out_start: int,
    ) -> int:
        return decode_into(data, start, count, out, out_start)

    def encode(self, text: str) -> bytes:
        return encode(text)

    def decode(self, data: bytes) -> str:
        return decode(data)

    def __repr__(self) -> str:
        return f"JapaneseEncoding(name={self.name!r})"

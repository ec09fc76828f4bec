"""
zora-text: fixed-table text codec for Oracle of Ages/Seasons names

Converts the one-byte-per-character name fields used by the Japanese
releases to and from Python strings.

Quick Start:
    >>> import zora_text as zt
    >>> zt.encode("Link")
    b'LINK'
    >>> zt.decode(b'\\xd7\\xdd\\xb7')
    'リンク'
    >>> "ゼルダ".encode("zora-japanese")
    b'\\xef\\xd8\\xf1'

Features:
    - Buffer-level encode/decode with explicit start/count ranges
    - Case-folding of a-z, silent null for unsupported characters
    - Registered as the "zora-japanese" Python codec
    - Optional CLI for inspecting bytes and the table
"""

__version__ = "0.1.0"

from zora_text.core.constants import ALPHABET, BASE_OFFSET, NULL_BYTE, NULL_CHAR
from zora_text.codec.japanese import (
    JapaneseEncoding,
    byte_count_for,
    char_count_for,
    decode,
    decode_into,
    encode,
    encode_into,
    max_byte_count,
    max_char_count,
)
from zora_text.codec.registry import CODEC_NAME, register

register()

__all__ = [
    # Version
    "__version__",
    # Table
    "ALPHABET",
    "BASE_OFFSET",
    "NULL_BYTE",
    "NULL_CHAR",
    # Codec
    "JapaneseEncoding",
    "byte_count_for",
    "char_count_for",
    "decode",
    "decode_into",
    "encode",
    "encode_into",
    "max_byte_count",
    "max_char_count",
    # Registry
    "CODEC_NAME",
    "register",
]

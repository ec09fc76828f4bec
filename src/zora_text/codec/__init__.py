"""Encoding/decoding for fixed-width name fields."""

from zora_text.codec.japanese import (
    JapaneseEncoding,
    byte_count_for,
    char_count_for,
    decode,
    decode_byte,
    decode_into,
    encode,
    encode_char,
    encode_into,
    max_byte_count,
    max_char_count,
)
from zora_text.codec.registry import CODEC_NAME, register

__all__ = [
    "JapaneseEncoding",
    "byte_count_for",
    "char_count_for",
    "decode",
    "decode_byte",
    "decode_into",
    "encode",
    "encode_char",
    "encode_into",
    "max_byte_count",
    "max_char_count",
    "CODEC_NAME",
    "register",
]

"""Alphabet table and shared constants."""

from zora_text.core.constants import (
    ALPHABET,
    BASE_OFFSET,
    CHAR_TO_BYTE,
    CODEC_NAME,
    NULL_BYTE,
    NULL_CHAR,
)

__all__ = ["ALPHABET", "BASE_OFFSET", "CHAR_TO_BYTE", "CODEC_NAME", "NULL_BYTE", "NULL_CHAR"]

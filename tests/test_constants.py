"""Tests for the alphabet table."""

import pytest

from zora_text.core.constants import (
    ALPHABET,
    BASE_OFFSET,
    CHAR_TO_BYTE,
    NULL_CHAR,
)


class TestAlphabet:
    """Layout of the fixed table."""

    def test_covers_bytes_above_base_offset(self) -> None:
        assert BASE_OFFSET == 0x10
        assert len(ALPHABET) == 240

    def test_defined_entries_are_distinct(self) -> None:
        defined = [c for c in ALPHABET if c != NULL_CHAR]
        assert len(defined) == len(set(defined))

    @pytest.mark.parametrize("char,byte", [
        ('♥', 0x14),
        ('↑', 0x15),
        ('↓', 0x16),
        ('←', 0x17),
        ('→', 0x18),
        ('「', 0x1B),
        ('」', 0x1C),
        ('。', 0x1F),
        (' ', 0x20),
        ('0', 0x30),
        ('A', 0x41),
        ('Z', 0x5A),
        ('~', 0x5C),
        ('^', 0x5E),
        ('あ', 0x60),
        ('ぽ', 0xAF),
        ('ア', 0xB0),
        ('ポ', 0xFF),
    ])
    def test_glyph_positions(self, char: str, byte: int) -> None:
        assert ALPHABET[byte - BASE_OFFSET] == char

    def test_undefined_slots(self) -> None:
        for byte in (0x10, 0x11, 0x12, 0x13, 0x19, 0x1A, 0x1D, 0x1E, 0x5F):
            assert ALPHABET[byte - BASE_OFFSET] == NULL_CHAR

    def test_printable_ascii_keeps_ascii_values(self) -> None:
        for byte in range(0x20, 0x5F):
            if byte == 0x5C:
                continue
            assert ALPHABET[byte - BASE_OFFSET] == chr(byte)


class TestReverseIndex:
    """CHAR_TO_BYTE lookup table."""

    def test_null_is_not_indexed(self) -> None:
        assert NULL_CHAR not in CHAR_TO_BYTE

    def test_matches_forward_table(self) -> None:
        for char, byte in CHAR_TO_BYTE.items():
            assert ALPHABET[byte - BASE_OFFSET] == char

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            CHAR_TO_BYTE['x'] = 1  # type: ignore[index]

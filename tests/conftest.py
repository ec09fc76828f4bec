"""Shared pytest fixtures."""

import pytest

from zora_text.codec.japanese import JapaneseEncoding
from zora_text.core.constants import ALPHABET, NULL_CHAR


@pytest.fixture
def encoding() -> JapaneseEncoding:
    return JapaneseEncoding()


@pytest.fixture(scope="session")
def supported_chars() -> str:
    """Every character the table defines, in table order."""
    return ''.join(c for c in ALPHABET if c != NULL_CHAR)

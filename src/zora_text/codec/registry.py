"""Registration of the Japanese name table with Python's ``codecs`` module.

After :func:`register` runs (importing :mod:`zora_text` does this)::

    >>> "リンク".encode("zora-japanese")
    b'\\xd7\\xdd\\xb7'

The ``errors`` argument is accepted for protocol compatibility but has no
effect: unmapped characters always encode to byte 0 and undefined bytes
always decode to ``'\\0'``.
"""

import codecs
from typing import Optional

from zora_text.codec.japanese import decode, encode
from zora_text.core.constants import CODEC_NAME

ALIASES = ("zora_japanese", "zora_jp")

_registered = False


class Codec(codecs.Codec):
    """Fixed-table name codec."""

    def encode(  # pylint: disable=redefined-builtin
        self, input: str, errors: str = 'strict'
    ) -> tuple[bytes, int]:
        return encode(input), len(input)

    def decode(  # pylint: disable=redefined-builtin
        self, input: bytes, errors: str = 'strict'
    ) -> tuple[str, int]:
        data = bytes(input)
        return decode(data), len(data)


class IncrementalEncoder(codecs.IncrementalEncoder):
    """Stateless incremental encoder; every character is one byte."""

    def encode(  # pylint: disable=redefined-builtin
        self, input: str, final: bool = False
    ) -> bytes:
        return encode(input)


class IncrementalDecoder(codecs.IncrementalDecoder):
    """Stateless incremental decoder; every byte is one character."""

    def decode(  # pylint: disable=redefined-builtin
        self, input: bytes, final: bool = False
    ) -> str:
        return decode(bytes(input))


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def _search(name: str) -> Optional[codecs.CodecInfo]:
    normalized = name.lower().replace('-', '_')
    if normalized == CODEC_NAME.replace('-', '_') or normalized in ALIASES:
        return getregentry()
    return None


def register() -> None:
    """Register the codec search function (safe to call more than once)."""
    global _registered
    if _registered:
        return
    codecs.register(_search)
    _registered = True

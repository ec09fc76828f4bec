"""Shared constants for the fixed-table name codec."""

from types import MappingProxyType
from typing import Mapping

# Name under which the table is registered with the codecs module
CODEC_NAME = "zora-japanese"

# Byte value of table index 0
BASE_OFFSET = 0x10

# Null sentinel: terminator, undefined slot, and unmapped character
NULL_CHAR = "\0"
NULL_BYTE = 0

# Alphabet table (byte = index + BASE_OFFSET, so bytes 0x10-0xFF)
# Undefined slots hold NULL_CHAR.
ALPHABET: tuple[str, ...] = (
    # 0x10-0x1F: game glyphs
    '\0', '\0', '\0', '\0', '♥', '↑', '↓', '←',
    '→', '\0', '\0', '「', '」', '\0', '\0', '。',
    # 0x20-0x5F: ASCII subset ('~' sits where '\' would be)
    ' ', '!', '"', '#', '$', '%', '&', "'", '(', ')', '*', '+', ',', '-', '.', '/',
    '0', '1', '2', '3', '4', '5', '6', '7', '8', '9', ':', ';', '<', '=', '>', '?',
    '@', 'A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'I', 'J', 'K', 'L', 'M', 'N', 'O',
    'P', 'Q', 'R', 'S', 'T', 'U', 'V', 'W', 'X', 'Y', 'Z', '[', '~', ']', '^', '\0',
    # 0x60-0xAF: hiragana
    'あ', 'い', 'う', 'え', 'お', 'か', 'き', 'く', 'け', 'こ', 'さ', 'し', 'す', 'せ', 'そ', 'た',
    'ち', 'つ', 'て', 'と', 'な', 'に', 'ぬ', 'ね', 'の', 'は', 'ひ', 'ふ', 'へ', 'ほ', 'ま', 'み',
    'む', 'め', 'も', 'や', 'ゆ', 'よ', 'ら', 'り', 'る', 'れ', 'ろ', 'を', 'わ', 'ん', 'ぁ', 'ぃ',
    'ぅ', 'ぇ', 'ぉ', 'っ', 'ゃ', 'ゅ', 'ょ', 'が', 'ぎ', 'ぐ', 'げ', 'ご', 'ざ', 'じ', 'ず', 'ぜ',
    'ぞ', 'だ', 'ぢ', 'づ', 'で', 'ど', 'ば', 'び', 'ぶ', 'べ', 'ぼ', 'ぱ', 'ぴ', 'ぷ', 'ぺ', 'ぽ',
    # 0xB0-0xFF: katakana
    'ア', 'イ', 'ウ', 'エ', 'オ', 'カ', 'キ', 'ク', 'ケ', 'コ', 'サ', 'シ', 'ス', 'セ', 'ソ', 'タ',
    'チ', 'ツ', 'テ', 'ト', 'ナ', 'ニ', 'ヌ', 'ネ', 'ノ', 'ハ', 'ヒ', 'フ', 'ヘ', 'ホ', 'マ', 'ミ',
    'ム', 'メ', 'モ', 'ヤ', 'ユ', 'ヨ', 'ラ', 'リ', 'ル', 'レ', 'ロ', 'ワ', 'ヲ', 'ン', 'ァ', 'ィ',
    'ゥ', 'ェ', 'ォ', 'ッ', 'ャ', 'ュ', 'ョ', 'ガ', 'ギ', 'グ', 'ゲ', 'ゴ', 'ザ', 'ジ', 'ズ', 'ゼ',
    'ゾ', 'ダ', 'ヂ', 'ヅ', 'デ', 'ド', 'バ', 'ビ', 'ブ', 'ベ', 'ボ', 'パ', 'ピ', 'プ', 'ペ', 'ポ',
)

assert len(ALPHABET) == 0x100 - BASE_OFFSET


def _build_reverse() -> Mapping[str, int]:
    reverse: dict[str, int] = {}
    for idx, char in enumerate(ALPHABET):
        if char == NULL_CHAR:
            continue
        # First match wins
        reverse.setdefault(char, idx + BASE_OFFSET)
    return MappingProxyType(reverse)


# Character -> byte. The null sentinel is never a key.
CHAR_TO_BYTE: Mapping[str, int] = _build_reverse()

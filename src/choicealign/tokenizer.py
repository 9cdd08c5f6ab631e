"""Word breaker used to align utterances against choice values.

The default tokenizer only breaks on whitespace, punctuation and symbol blocks
and lowercases each token. Callers that need stemming or other normalization
can wrap it and substitute `normalized` while keeping offsets untouched.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable
from dataclasses import dataclass

# Inclusive code point ranges treated as separators, sorted by start.
_BREAKING_RANGES: tuple[tuple[int, int], ...] = (
    (0x0000, 0x002F),
    (0x003A, 0x0040),
    (0x005B, 0x0060),
    (0x007B, 0x00BF),
    (0x02B9, 0x036F),
    (0x2000, 0x2BFF),
    (0x2E00, 0x2E7F),
)
_RANGE_STARTS = [start for start, _ in _BREAKING_RANGES]
_BMP_MAX = 0xFFFF


@dataclass(frozen=True)
class Token:
    """Positioned token; `start` and `end` are inclusive character offsets."""

    start: int
    end: int
    text: str
    normalized: str


TokenizerFunction = Callable[[str, str | None], list[Token]]


def is_breaking_char(code_point: int) -> bool:
    """Return True when the code point separates tokens."""
    slot = bisect_right(_RANGE_STARTS, code_point) - 1
    return slot >= 0 and code_point <= _BREAKING_RANGES[slot][1]


def tokenize(text: str | None, locale: str | None = None) -> list[Token]:
    """Split text into tokens on spaces, punctuation and symbols.

    Code points outside the Basic Multilingual Plane (emoji and friends) are
    emitted as standalone tokens. `locale` is accepted so that custom
    tokenizers share the same signature; the default rules ignore it.
    """
    tokens: list[Token] = []
    if not text:
        return tokens

    token_start: int | None = None
    for position, char in enumerate(text):
        code_point = ord(char)
        if is_breaking_char(code_point):
            if token_start is not None:
                tokens.append(_close_token(text, token_start, position - 1))
                token_start = None
        elif code_point > _BMP_MAX:
            if token_start is not None:
                tokens.append(_close_token(text, token_start, position - 1))
                token_start = None
            tokens.append(Token(start=position, end=position, text=char, normalized=char))
        elif token_start is None:
            token_start = position

    if token_start is not None:
        tokens.append(_close_token(text, token_start, len(text) - 1))
    return tokens


def _close_token(text: str, start: int, end: int) -> Token:
    chunk = text[start : end + 1]
    return Token(start=start, end=end, text=chunk, normalized=chunk.lower())

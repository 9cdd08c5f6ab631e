"""English ordinal and number grammar."""

from __future__ import annotations

import re

from choicealign.models import ModelResult, NumberResolution
from choicealign.recognizers.base import BaseNumberRecognizer, scan

_ORDINAL_WORDS = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "sixth": 6,
    "seventh": 7,
    "eighth": 8,
    "ninth": 9,
    "tenth": 10,
    "eleventh": 11,
    "twelfth": 12,
    "thirteenth": 13,
    "fourteenth": 14,
    "fifteenth": 15,
    "sixteenth": 16,
    "seventeenth": 17,
    "eighteenth": 18,
    "nineteenth": 19,
    "twentieth": 20,
}
_CARDINAL_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
}


def _word_alternation(words: dict[str, int]) -> str:
    # Longest first so "sixteenth" wins over "six".
    return "|".join(sorted(words, key=len, reverse=True))


_ORDINAL_RE = re.compile(
    rf"\b({_word_alternation(_ORDINAL_WORDS)}|\d+(?=st\b|nd\b|rd\b|th\b))(?:st|nd|rd|th)?\b",
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(
    rf"(?<![\w.,\-])({_word_alternation(_CARDINAL_WORDS)}|\d+)(?![\w\-]|[.,]\d)",
    re.IGNORECASE,
)


class EnglishNumberRecognizer(BaseNumberRecognizer):
    """Recognizes "first".."twentieth", "1st"-style ordinals, "one".."twenty" and digits."""

    code = "en"
    name = "English"
    recognizer_id = "english-regex-v1"

    def recognize_ordinal(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        return scan(text, _ORDINAL_RE, "ordinal", _ORDINAL_WORDS)

    def recognize_number(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        return scan(text, _NUMBER_RE, "number", _CARDINAL_WORDS)


ENGLISH_RECOGNIZER = EnglishNumberRecognizer()

"""Generic/fallback recognizer for locales without a dedicated grammar."""

from __future__ import annotations

import re

from choicealign.models import ModelResult, NumberResolution
from choicealign.recognizers.base import BaseNumberRecognizer, scan

_NUMBER_RE = re.compile(r"(?<![\w.,\-])(\d+)(?![\w\-]|[.,]\d)")


class GenericNumberRecognizer(BaseNumberRecognizer):
    """Digits-only recognizer reusable across languages."""

    def __init__(self, *, code: str, name: str) -> None:
        self.code = code
        self.name = name
        self.recognizer_id = "generic-digits-v1"

    def recognize_ordinal(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        return []

    def recognize_number(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        return scan(text, _NUMBER_RE, "number")


GENERIC_RECOGNIZER = GenericNumberRecognizer(code="und", name="Undetermined")

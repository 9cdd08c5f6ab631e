"""Ordinal/number recognizer interfaces."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Protocol

from choicealign.models import ModelResult, NumberResolution


class NumberRecognizer(Protocol):
    """Collaborator that finds ordinals and numbers within an utterance.

    Every resolution `value` is a string-encoded integer. Ordinals resolve to
    their 1-based position ("second" -> "2").
    """

    def recognize_ordinal(
        self, text: str, locale: str
    ) -> list[ModelResult[NumberResolution]]:
        """Find ordinal expressions such as "the third one"."""

    def recognize_number(
        self, text: str, locale: str
    ) -> list[ModelResult[NumberResolution]]:
        """Find cardinal numbers such as "3" or "three"."""


class BaseNumberRecognizer(ABC):
    """Abstract base for locale-specific recognizers backed by regex grammars."""

    code: str
    name: str
    recognizer_id: str

    @abstractmethod
    def recognize_ordinal(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        """Find ordinal expressions in text."""

    @abstractmethod
    def recognize_number(self, text: str, locale: str) -> list[ModelResult[NumberResolution]]:
        """Find cardinal numbers in text."""


def scan(
    text: str,
    pattern: re.Pattern[str],
    type_name: str,
    resolve: dict[str, int] | None = None,
) -> list[ModelResult[NumberResolution]]:
    """Collect regex matches as results.

    Group 1 of `pattern` holds either digits or a word looked up in `resolve`.
    Matches whose group cannot be resolved are left out.
    """
    results: list[ModelResult[NumberResolution]] = []
    if not text:
        return results

    for match in pattern.finditer(text):
        raw = match.group(1)
        if raw.isdecimal():
            number = int(raw)
        elif resolve is not None and raw.casefold() in resolve:
            number = resolve[raw.casefold()]
        else:
            continue
        results.append(
            ModelResult[NumberResolution](
                text=match.group(0),
                start=match.start(),
                end=match.end() - 1,
                type_name=type_name,
                resolution=NumberResolution(value=str(number)),
            )
        )
    return results

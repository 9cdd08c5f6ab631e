"""Number recognizer registry and resolution."""

from __future__ import annotations

from choicealign.recognizers.base import BaseNumberRecognizer
from choicealign.recognizers.english import ENGLISH_RECOGNIZER
from choicealign.recognizers.generic import GENERIC_RECOGNIZER

_RECOGNIZERS: dict[str, BaseNumberRecognizer] = {
    "en": ENGLISH_RECOGNIZER,
    "und": GENERIC_RECOGNIZER,
}

_ALIASES = {
    "auto": "und",
    "en-us": "en",
    "en-gb": "en",
    "en-ca": "en",
    "en-au": "en",
    "en-in": "en",
}


def resolve_number_recognizer(locale: str | None) -> BaseNumberRecognizer:
    """Resolve a locale code to the best available recognizer.

    Unknown regional variants fall back to their base language, and unknown
    languages to the digits-only generic recognizer.
    """
    if not locale:
        return GENERIC_RECOGNIZER
    code = locale.casefold().replace("_", "-")
    canonical = _ALIASES.get(code, code)
    if canonical in _RECOGNIZERS:
        return _RECOGNIZERS[canonical]
    return _RECOGNIZERS.get(canonical.split("-", 1)[0], GENERIC_RECOGNIZER)

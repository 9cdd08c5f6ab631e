"""Options accepted by the matcher and the choice recognizer."""

from __future__ import annotations

from dataclasses import dataclass

from choicealign.recognizers.base import NumberRecognizer
from choicealign.tokenizer import TokenizerFunction

DEFAULT_LOCALE = "en-us"
DEFAULT_MAX_TOKEN_DISTANCE = 2
DEFAULT_CHARS_PER_EDIT = 4


@dataclass(frozen=True)
class FindValuesOptions:
    """Options controlling how values are aligned against an utterance.

    `max_token_distance` is the number of utterance tokens that may be skipped
    between two consecutive matched value tokens. With `fuzzy_matching` on,
    a value token tolerates one edit per `chars_per_edit` characters.
    """

    locale: str = DEFAULT_LOCALE
    tokenizer: TokenizerFunction | None = None
    allow_partial_matches: bool = False
    max_token_distance: int = DEFAULT_MAX_TOKEN_DISTANCE
    fuzzy_matching: bool = False
    chars_per_edit: int = DEFAULT_CHARS_PER_EDIT

    def __post_init__(self) -> None:
        if self.max_token_distance < 0:
            raise ValueError(
                f"max_token_distance must be >= 0, got {self.max_token_distance!r}"
            )
        if self.chars_per_edit < 1:
            raise ValueError(f"chars_per_edit must be >= 1, got {self.chars_per_edit!r}")


@dataclass(frozen=True)
class FindChoicesOptions(FindValuesOptions):
    """Adds control over which parts of a choice are searched."""

    exclude_value: bool = False
    include_action: bool = False


@dataclass(frozen=True)
class RecognizeChoicesOptions(FindChoicesOptions):
    """Adds the ordinal/number fallbacks used by `recognize_choices`."""

    recognize_ordinals: bool = True
    recognize_numbers: bool = True
    number_recognizer: NumberRecognizer | None = None

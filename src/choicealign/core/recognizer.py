"""Choice recognition layered over `find_choices`.

Utterances are recognized in the following order, and only the first
strategy that returns anything contributes results:

- by name or synonym using `find_choices()`,
- by 1-based ordinal position ("the second one"),
- by 1-based index ("2").

Mixing strategies would let "the third one" resolve both as an ordinal and
as the number "one".
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from choicealign.match import ChoiceInput, find_indexed_choices, normalize_choices
from choicealign.models import Choice, FoundChoice, ModelResult, NumberResolution
from choicealign.options import RecognizeChoicesOptions
from choicealign.recognizers import resolve_number_recognizer

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")


def recognize_choices(
    utterance: str | None,
    choices: Sequence[ChoiceInput] | None,
    options: RecognizeChoicesOptions | None = None,
) -> list[ModelResult[FoundChoice]]:
    """Recognize which of the choices the utterance refers to."""
    opts = options or RecognizeChoicesOptions()
    if not utterance or not choices:
        return []

    indexed_choices = normalize_choices(choices)
    matched = find_indexed_choices(utterance, indexed_choices, opts)
    if matched:
        return matched

    recognizer = opts.number_recognizer or resolve_number_recognizer(opts.locale)
    by_index = dict(indexed_choices)
    ordinals: list[ModelResult[NumberResolution]] = []
    if opts.recognize_ordinals:
        ordinals = recognizer.recognize_ordinal(utterance, opts.locale)
    if ordinals:
        matched = _match_by_index(ordinals, by_index, len(choices))
        strategy = "ordinal"
    elif opts.recognize_numbers:
        numbers = recognizer.recognize_number(utterance, opts.locale)
        matched = _match_by_index(numbers, by_index, len(choices))
        strategy = "number"
    else:
        return []

    logger.debug("Resolved %d choices by %s", len(matched), strategy)
    return sorted(matched, key=lambda result: result.start)


def _match_by_index(
    candidates: list[ModelResult[NumberResolution]],
    by_index: dict[int, Choice],
    choice_count: int,
) -> list[ModelResult[FoundChoice]]:
    matched: list[ModelResult[FoundChoice]] = []
    for candidate in candidates:
        index = _parse_index(candidate.resolution.value)
        if index is None or not 0 <= index < choice_count or index not in by_index:
            logger.debug(
                "Skipping %r: no choice at position %r", candidate.text, candidate.resolution.value
            )
            continue
        matched.append(
            ModelResult[FoundChoice](
                text=candidate.text,
                start=candidate.start,
                end=candidate.end,
                type_name="choice",
                resolution=FoundChoice(value=by_index[index].value, index=index, score=1.0),
            )
        )
    return matched


def _parse_index(value: str) -> int | None:
    """Convert a 1-based integer string into a 0-based index."""
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text) - 1

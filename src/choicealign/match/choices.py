"""Choice expansion on top of `find_values`."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from choicealign.match.values import SortedValue, find_values
from choicealign.models import Choice, FoundChoice, ModelResult
from choicealign.options import FindChoicesOptions

ChoiceInput = str | Choice | Mapping[str, Any] | None


def normalize_choices(choices: Sequence[ChoiceInput] | None) -> list[tuple[int, Choice]]:
    """Turn bare strings and mappings into `Choice` objects.

    Falsy entries are dropped; each kept choice stays paired with its position
    in the caller's list so indexes always refer back to that list.
    """
    normalized: list[tuple[int, Choice]] = []
    for index, choice in enumerate(choices or []):
        if not choice:
            continue
        if isinstance(choice, str):
            normalized.append((index, Choice(value=choice)))
        elif isinstance(choice, Choice):
            normalized.append((index, choice))
        else:
            normalized.append((index, Choice.model_validate(choice)))
    return normalized


def find_choices(
    utterance: str | None,
    choices: Sequence[ChoiceInput] | None,
    options: FindChoicesOptions | None = None,
) -> list[ModelResult[FoundChoice]]:
    """Find choices mentioned by name or synonym within the utterance."""
    return find_indexed_choices(utterance, normalize_choices(choices), options)


def find_indexed_choices(
    utterance: str | None,
    indexed_choices: list[tuple[int, Choice]],
    options: FindChoicesOptions | None = None,
) -> list[ModelResult[FoundChoice]]:
    """Same as `find_choices` for choices already passed through `normalize_choices`."""
    opts = options or FindChoicesOptions()
    by_index = dict(indexed_choices)

    synonyms: list[SortedValue] = []
    for index, choice in indexed_choices:
        if not opts.exclude_value:
            synonyms.append(SortedValue(value=choice.value, index=index))
        title = _action_title(choice)
        if opts.include_action and title:
            synonyms.append(SortedValue(value=title, index=index))
        for synonym in choice.synonyms:
            synonyms.append(SortedValue(value=synonym, index=index))

    results: list[ModelResult[FoundChoice]] = []
    for found in find_values(utterance, synonyms, opts):
        choice = by_index[found.resolution.index]
        results.append(
            ModelResult[FoundChoice](
                text=found.text,
                start=found.start,
                end=found.end,
                type_name="choice",
                resolution=FoundChoice(
                    value=choice.value,
                    index=found.resolution.index,
                    score=found.resolution.score,
                    synonym=found.resolution.value,
                    action=choice.action if opts.include_action else None,
                ),
            )
        )
    return results


def _action_title(choice: Choice) -> str | None:
    action = choice.action
    if action is None:
        return None
    if isinstance(action, Mapping):
        title = action.get("title")
    else:
        title = getattr(action, "title", None)
    if isinstance(title, str):
        return title
    return None

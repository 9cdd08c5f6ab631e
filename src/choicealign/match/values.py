"""Token alignment of candidate values within an utterance."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from choicealign.models import FoundValue, ModelResult
from choicealign.options import FindValuesOptions
from choicealign.tokenizer import Token, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortedValue:
    """Candidate string tagged with the index of the entry that owns it."""

    value: str
    index: int


@dataclass(frozen=True)
class _TokenHit:
    position: int
    weight: float


@dataclass(frozen=True)
class _Candidate:
    value: str
    index: int
    start_token: int
    end_token: int
    score: float


def find_values(
    utterance: str | None,
    values: Sequence[SortedValue],
    options: FindValuesOptions | None = None,
) -> list[ModelResult[FoundValue]]:
    """Find every value mentioned in the utterance.

    Values are matched token by token and in order, so "second last" matches
    within "the second from last one" with one skipped token. Each value index
    is returned at most once and no two results share an utterance token.
    Results are sorted by their position within the utterance.
    """
    opts = options or FindValuesOptions()
    if not utterance or not values:
        return []

    tokenizer = opts.tokenizer or tokenize
    tokens = tokenizer(utterance, opts.locale)
    if not tokens:
        return []

    token_cache: dict[str, list[Token]] = {}
    candidates: list[_Candidate] = []
    # Longest values are searched first.
    for entry in sorted(values, key=lambda item: len(item.value), reverse=True):
        key = entry.value.strip()
        value_tokens = token_cache.get(key)
        if value_tokens is None:
            value_tokens = tokenizer(key, opts.locale)
            token_cache[key] = value_tokens
        if not value_tokens:
            continue

        # Keep searching after each attempt so repeated mentions are all found.
        start_pos = 0
        while start_pos < len(tokens):
            candidate, first_hit = _match_value(tokens, entry, value_tokens, start_pos, opts)
            if candidate is not None:
                candidates.append(candidate)
                start_pos = candidate.end_token + 1
            elif first_hit >= 0:
                start_pos = first_hit + 1
            else:
                break

    logger.debug(
        "Matched %d candidate spans for %d values over %d tokens",
        len(candidates),
        len(values),
        len(tokens),
    )
    return _select_results(utterance, tokens, candidates)


def _match_value(
    tokens: list[Token],
    entry: SortedValue,
    value_tokens: list[Token],
    start_pos: int,
    opts: FindValuesOptions,
) -> tuple[_Candidate | None, int]:
    """Align value tokens from `start_pos`; also returns the first hit position or -1."""
    matched = 0
    matched_weight = 0.0
    total_deviation = 0
    start = -1
    end = -1
    for value_token in value_tokens:
        hit = _index_of_token(tokens, value_token, start_pos, opts)
        if hit is None:
            continue

        # Distance counts the utterance tokens skipped since the previous hit.
        distance = hit.position - start_pos if matched > 0 else 0
        if distance > opts.max_token_distance:
            continue

        matched += 1
        matched_weight += hit.weight
        total_deviation += distance
        start_pos = hit.position + 1
        if start < 0:
            start = hit.position
        end = hit.position

    if matched == 0:
        return None, -1
    if matched < len(value_tokens) and not opts.allow_partial_matches:
        return None, start

    completeness = matched_weight / len(value_tokens)
    accuracy = matched / (matched + total_deviation)
    score = min(1.0, max(0.0, completeness * accuracy))
    candidate = _Candidate(
        value=entry.value,
        index=entry.index,
        start_token=start,
        end_token=end,
        score=score,
    )
    return candidate, start


def _index_of_token(
    tokens: list[Token],
    value_token: Token,
    start_pos: int,
    opts: FindValuesOptions,
) -> _TokenHit | None:
    for position in range(start_pos, len(tokens)):
        weight = token_similarity(tokens[position].normalized, value_token.normalized, opts)
        if weight > 0.0:
            return _TokenHit(position=position, weight=weight)
    return None


def token_similarity(utterance_token: str, value_token: str, opts: FindValuesOptions) -> float:
    """Return 1.0 for an exact match, a reduced weight for a tolerated typo, else 0.0."""
    if utterance_token == value_token:
        return 1.0
    if not opts.fuzzy_matching:
        return 0.0

    allowed_edits = len(value_token) // opts.chars_per_edit
    if allowed_edits == 0:
        return 0.0
    edits = Levenshtein.distance(utterance_token, value_token, score_cutoff=allowed_edits)
    if edits > allowed_edits:
        return 0.0
    return 1.0 - edits / max(len(utterance_token), len(value_token))


def _select_results(
    utterance: str,
    tokens: list[Token],
    candidates: list[_Candidate],
) -> list[ModelResult[FoundValue]]:
    ranked = sorted(candidates, key=lambda item: (-item.score, item.start_token))

    found_indexes: set[int] = set()
    used_tokens: set[int] = set()
    results: list[ModelResult[FoundValue]] = []
    for candidate in ranked:
        span = range(candidate.start_token, candidate.end_token + 1)
        if candidate.index in found_indexes:
            continue
        if any(position in used_tokens for position in span):
            continue
        found_indexes.add(candidate.index)
        used_tokens.update(span)

        start = tokens[candidate.start_token].start
        end = tokens[candidate.end_token].end
        results.append(
            ModelResult[FoundValue](
                text=utterance[start : end + 1],
                start=start,
                end=end,
                type_name="value",
                resolution=FoundValue(
                    value=candidate.value,
                    index=candidate.index,
                    score=candidate.score,
                    start_token=candidate.start_token,
                    end_token=candidate.end_token,
                ),
            )
        )

    results.sort(key=lambda result: result.start)
    return results

"""Value and choice matching."""

from choicealign.match.choices import (
    ChoiceInput,
    find_choices,
    find_indexed_choices,
    normalize_choices,
)
from choicealign.match.values import SortedValue, find_values

__all__ = [
    "ChoiceInput",
    "SortedValue",
    "find_choices",
    "find_indexed_choices",
    "find_values",
    "normalize_choices",
]

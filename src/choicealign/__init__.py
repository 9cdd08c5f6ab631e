"""Recognize which of a list of choices a free-text utterance refers to."""

from choicealign.core import recognize_choices
from choicealign.match import SortedValue, find_choices, find_values, normalize_choices
from choicealign.models import Choice, FoundChoice, FoundValue, ModelResult
from choicealign.options import FindChoicesOptions, FindValuesOptions, RecognizeChoicesOptions
from choicealign.tokenizer import Token, tokenize

__version__ = "0.1.0"

__all__ = [
    "Choice",
    "FindChoicesOptions",
    "FindValuesOptions",
    "FoundChoice",
    "FoundValue",
    "ModelResult",
    "RecognizeChoicesOptions",
    "SortedValue",
    "Token",
    "__version__",
    "find_choices",
    "find_values",
    "normalize_choices",
    "recognize_choices",
    "tokenize",
]

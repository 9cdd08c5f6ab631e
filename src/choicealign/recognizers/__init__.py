"""Ordinal and number recognizers used for index fallbacks."""

from choicealign.recognizers.base import BaseNumberRecognizer, NumberRecognizer
from choicealign.recognizers.registry import resolve_number_recognizer

__all__ = ["BaseNumberRecognizer", "NumberRecognizer", "resolve_number_recognizer"]

"""Choice recognition and request pipeline."""

from choicealign.core.pipeline import build_options, run_find, run_recognize, run_tokenize
from choicealign.core.recognizer import recognize_choices

__all__ = ["build_options", "recognize_choices", "run_find", "run_recognize", "run_tokenize"]

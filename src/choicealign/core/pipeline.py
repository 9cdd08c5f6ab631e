"""Request-level entry points shared by the CLI and the HTTP API."""

from __future__ import annotations

from choicealign.config import AppConfig
from choicealign.core.recognizer import recognize_choices
from choicealign.match import find_choices
from choicealign.models import (
    ChoicesRequest,
    ChoicesResponse,
    MatchOptions,
    TokenizeRequest,
    TokenizeResponse,
)
from choicealign.options import (
    DEFAULT_LOCALE,
    DEFAULT_MAX_TOKEN_DISTANCE,
    RecognizeChoicesOptions,
)
from choicealign.tokenizer import tokenize


def run_tokenize(request: TokenizeRequest, config: AppConfig | None = None) -> TokenizeResponse:
    """Tokenize request text with the built-in tokenizer."""
    locale = request.locale or (config.locale if config is not None else DEFAULT_LOCALE)
    return TokenizeResponse(tokens=tokenize(request.text, locale))


def run_find(request: ChoicesRequest, config: AppConfig | None = None) -> ChoicesResponse:
    """Match choices by name and synonym only."""
    options = build_options(request.options, config)
    return ChoicesResponse(results=find_choices(request.utterance, request.choices, options))


def run_recognize(request: ChoicesRequest, config: AppConfig | None = None) -> ChoicesResponse:
    """Match choices by name, then ordinal, then index."""
    options = build_options(request.options, config)
    return ChoicesResponse(results=recognize_choices(request.utterance, request.choices, options))


def build_options(
    payload: MatchOptions,
    config: AppConfig | None = None,
) -> RecognizeChoicesOptions:
    """Merge request options with configured defaults."""
    default_locale = config.locale if config is not None else DEFAULT_LOCALE
    default_distance = (
        config.max_token_distance if config is not None else DEFAULT_MAX_TOKEN_DISTANCE
    )
    return RecognizeChoicesOptions(
        locale=payload.locale or default_locale,
        allow_partial_matches=payload.allow_partial_matches,
        max_token_distance=(
            payload.max_token_distance
            if payload.max_token_distance is not None
            else default_distance
        ),
        fuzzy_matching=payload.fuzzy_matching,
        chars_per_edit=payload.chars_per_edit,
        exclude_value=payload.exclude_value,
        include_action=payload.include_action,
        recognize_ordinals=payload.recognize_ordinals,
        recognize_numbers=payload.recognize_numbers,
    )

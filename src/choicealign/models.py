"""Shared data models."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field

from choicealign.tokenizer import Token

ResolutionT = TypeVar("ResolutionT")


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class Choice(BaseModel):
    """Selectable option with optional synonyms and an opaque action payload."""

    value: str
    action: Any = None
    synonyms: list[str] = Field(default_factory=list)


class FoundValue(BaseModel):
    """Value matched within an utterance, including the matched token span."""

    value: str
    index: int = Field(ge=0)
    score: float = Field(ge=0.0, le=1.0)
    start_token: int = Field(ge=0)
    end_token: int = Field(ge=0)


class FoundChoice(BaseModel):
    """Choice matched within an utterance."""

    value: str
    index: int = Field(ge=0)
    score: float = Field(ge=0.0, le=1.0)
    synonym: str | None = None
    action: Any = None


class NumberResolution(BaseModel):
    """Integer recognized by an ordinal/number recognizer, encoded as a string."""

    value: str


class ModelResult(BaseModel, Generic[ResolutionT]):
    """Span of the utterance together with what it resolved to."""

    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    type_name: str
    resolution: ResolutionT


class MatchOptions(BaseModel):
    """Serializable subset of the matcher/recognizer options used by CLI and API."""

    locale: str | None = Field(default=None, min_length=2)
    allow_partial_matches: bool = False
    max_token_distance: int | None = Field(default=None, ge=0)
    fuzzy_matching: bool = False
    chars_per_edit: int = Field(default=4, ge=1)
    exclude_value: bool = False
    include_action: bool = False
    recognize_ordinals: bool = True
    recognize_numbers: bool = True


class TokenizeRequest(BaseModel):
    """Tokenization request payload."""

    text: str
    locale: str | None = None


class TokenizeResponse(BaseModel):
    """Tokens produced for a tokenization request."""

    tokens: list[Token]


class ChoicesRequest(BaseModel):
    """Utterance plus the choices to search, used by both CLI and API."""

    utterance: str
    choices: list[str | Choice | None]
    options: MatchOptions = Field(default_factory=MatchOptions)


class ChoicesResponse(BaseModel):
    """Recognized choices sorted by position within the utterance."""

    results: list[ModelResult[FoundChoice]]

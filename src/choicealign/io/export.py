"""JSON serializers for tokenize and choice-recognition responses."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


def to_json(response: BaseModel) -> str:
    """Serialize a `TokenizeResponse` or `ChoicesResponse` to formatted JSON."""
    return response.model_dump_json(indent=2)


def write_json(response: BaseModel, output_path: str | Path) -> None:
    """Write tokens or choice results as JSON, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(response) + "\n", encoding="utf-8")

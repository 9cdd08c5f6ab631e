import json
from pathlib import Path

import pytest

from choicealign.cli import main


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: choicealign" in captured.out


def test_cli_tokenize_returns_json(capsys) -> None:
    exit_code = main(["tokenize", "Hello, world"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert [token["text"] for token in payload["tokens"]] == ["Hello", "world"]
    assert payload["tokens"][0]["normalized"] == "hello"
    assert payload["tokens"][1]["start"] == 7


def test_cli_recognize_by_ordinal(capsys) -> None:
    exit_code = main(["recognize", "the second one", "red", "green", "blue"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert len(payload["results"]) == 1
    result = payload["results"][0]
    assert result["type_name"] == "choice"
    assert result["text"] == "second"
    assert result["resolution"]["value"] == "green"
    assert result["resolution"]["index"] == 1


def test_cli_recognize_without_numbers(capsys) -> None:
    exit_code = main(["recognize", "3", "red", "green", "blue", "--no-numbers"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert json.loads(captured.out)["results"] == []


def test_cli_find_with_fuzzy(capsys) -> None:
    exit_code = main(["find", "gren", "red", "green", "blue", "--fuzzy"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["results"][0]["resolution"]["value"] == "green"
    assert payload["results"][0]["resolution"]["score"] == pytest.approx(0.8)


def test_cli_find_writes_json_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "results.json"
    exit_code = main(["find", "blue or red", "red", "green", "blue", "-o", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert output_path.exists()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert [result["resolution"]["index"] for result in payload["results"]] == [2, 0]
    assert "Wrote JSON" in captured.out


def test_cli_rejects_negative_token_distance(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["find", "red", "red", "--max-token-distance", "-1"])
    captured = capsys.readouterr()

    assert exc_info.value.code == 2
    assert "max_token_distance" in captured.err

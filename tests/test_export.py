import json
from pathlib import Path

from choicealign.core import run_recognize
from choicealign.io import to_json, write_json
from choicealign.models import ChoicesRequest


def test_to_json_and_write_json(tmp_path: Path) -> None:
    response = run_recognize(
        ChoicesRequest(utterance="3", choices=["red", "green", "blue"]),
    )

    payload = json.loads(to_json(response))
    assert payload["results"][0]["resolution"]["value"] == "blue"
    assert payload["results"][0]["type_name"] == "choice"

    output_path = tmp_path / "out" / "results.json"
    write_json(response, output_path)
    written = json.loads(output_path.read_text(encoding="utf-8"))
    assert written == payload

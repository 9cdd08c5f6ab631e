from fastapi.testclient import TestClient

from choicealign.api import create_app


def test_health_endpoint() -> None:
    client = TestClient(create_app())

    response = client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["version"] == "0.1.0"
    assert payload["env"] == "dev"


def test_tokenize_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post("/v1/tokenize", json={"text": "hi😀there"})

    assert response.status_code == 200
    tokens = response.json()["tokens"]
    assert [token["text"] for token in tokens] == ["hi", "😀", "there"]


def test_find_endpoint_with_structured_choices() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/find",
        json={
            "utterance": "the crimson one",
            "choices": [{"value": "red", "synonyms": ["crimson"]}, "blue"],
        },
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 1
    assert results[0]["resolution"]["value"] == "red"
    assert results[0]["resolution"]["synonym"] == "crimson"
    assert results[0]["start"] == 4
    assert results[0]["end"] == 10


def test_find_endpoint_does_not_fall_back() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/find",
        json={"utterance": "the second one", "choices": ["red", "green", "blue"]},
    )

    assert response.status_code == 200
    assert response.json()["results"] == []


def test_recognize_endpoint() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/recognize",
        json={"utterance": "the second one", "choices": ["red", "green", "blue"]},
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 1
    assert results[0]["resolution"]["index"] == 1
    assert results[0]["resolution"]["score"] == 1.0


def test_recognize_endpoint_options() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/recognize",
        json={
            "utterance": "the second from last one",
            "choices": ["second last", "first"],
            "options": {"max_token_distance": 0, "allow_partial_matches": True},
        },
    )

    assert response.status_code == 200
    results = response.json()["results"]
    assert results[0]["text"] == "second"
    assert results[0]["resolution"]["score"] == 0.5


def test_recognize_endpoint_rejects_invalid_options() -> None:
    client = TestClient(create_app())
    response = client.post(
        "/v1/recognize",
        json={
            "utterance": "red",
            "choices": ["red"],
            "options": {"max_token_distance": -1},
        },
    )

    assert response.status_code == 422

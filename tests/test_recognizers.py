from choicealign.recognizers import resolve_number_recognizer


def test_resolve_recognizer_alias() -> None:
    recognizer = resolve_number_recognizer("en-US")
    assert recognizer.code == "en"
    assert recognizer.recognizer_id == "english-regex-v1"


def test_regional_variant_falls_back_to_base_language() -> None:
    assert resolve_number_recognizer("en_NZ").code == "en"


def test_generic_fallback_unknown_locale() -> None:
    assert resolve_number_recognizer("fr-fr").recognizer_id == "generic-digits-v1"
    assert resolve_number_recognizer(None).code == "und"


def test_english_ordinals() -> None:
    recognizer = resolve_number_recognizer("en")
    results = recognizer.recognize_ordinal("The Third one, or the 21st, not the fourteenth", "en")

    assert [result.text for result in results] == ["Third", "21st", "fourteenth"]
    assert [result.resolution.value for result in results] == ["3", "21", "14"]
    assert results[0].start == 4
    assert results[0].end == 8
    assert all(result.type_name == "ordinal" for result in results)


def test_english_numbers() -> None:
    recognizer = resolve_number_recognizer("en")
    results = recognizer.recognize_number("pick 2 or Seven, not 2.5, 3rd or someone", "en")

    assert [result.text for result in results] == ["2", "Seven"]
    assert [result.resolution.value for result in results] == ["2", "7"]
    assert all(result.type_name == "number" for result in results)


def test_english_empty_text() -> None:
    recognizer = resolve_number_recognizer("en")
    assert recognizer.recognize_ordinal("", "en") == []
    assert recognizer.recognize_number("", "en") == []


def test_generic_recognizer_digits_only() -> None:
    recognizer = resolve_number_recognizer("fr")

    assert recognizer.recognize_ordinal("le deuxième", "fr") == []
    results = recognizer.recognize_number("choix 2 ou deux", "fr")
    assert [result.resolution.value for result in results] == ["2"]
    assert results[0].start == 6

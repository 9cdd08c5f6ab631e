from choicealign.tokenizer import Token, is_breaking_char, tokenize


def test_tokenize_breaks_on_spaces_and_punctuation() -> None:
    tokens = tokenize("Hello, World!")

    assert tokens == [
        Token(start=0, end=4, text="Hello", normalized="hello"),
        Token(start=7, end=11, text="World", normalized="world"),
    ]


def test_tokenize_empty_input() -> None:
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize("  ,.!? ") == []


def test_tokenize_flushes_trailing_token() -> None:
    tokens = tokenize("pick blue")

    assert [token.text for token in tokens] == ["pick", "blue"]
    assert tokens[-1].end == 8


def test_tokenize_keeps_accented_letters() -> None:
    tokens = tokenize("¿Qué tal?")

    assert [token.text for token in tokens] == ["Qué", "tal"]
    assert tokens[0].normalized == "qué"
    assert tokens[0].start == 1


def test_tokenize_isolates_emoji() -> None:
    tokens = tokenize("hi😀there")

    assert [token.text for token in tokens] == ["hi", "😀", "there"]
    assert tokens[1].start == 2
    assert tokens[1].end == 2
    assert tokens[1].normalized == "😀"
    assert tokens[2].start == 3


def test_tokens_are_ordered_and_match_source() -> None:
    text = "The 2nd option — the “green” one 👍, please"
    tokens = tokenize(text)

    for previous, current in zip(tokens, tokens[1:]):
        assert previous.end < current.start
    for token in tokens:
        assert token.start <= token.end
        assert text[token.start : token.end + 1] == token.text


def test_rejoined_tokens_reproduce_boundaries() -> None:
    text = "abc😀déf"
    tokens = tokenize(text)
    rejoined = "".join(token.text for token in tokens)

    assert rejoined == text
    assert tokenize(rejoined) == tokens


def test_breaking_char_table() -> None:
    assert is_breaking_char(ord(" "))
    assert is_breaking_char(ord("/"))
    assert is_breaking_char(ord("@"))
    assert is_breaking_char(ord("~"))
    assert is_breaking_char(0x2014)
    assert not is_breaking_char(ord("a"))
    assert not is_breaking_char(ord("7"))
    assert not is_breaking_char(ord("é"))
    assert not is_breaking_char(ord("한"))

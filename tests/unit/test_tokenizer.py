from license_index.config import TokenizerConfig
from license_index.ingest.tokenizer import RegexTokenizer


def test_tokens_have_contiguous_indices_and_one_based_lines() -> None:
    tokenizer = RegexTokenizer()
    doc = tokenizer.tokenize(b"Copyright (c) 2020\n\nPermission is granted.\n")

    assert [t.text for t in doc.tokens] == ["copyright", "c", "2020", "permission", "is", "granted"]
    assert [t.index for t in doc.tokens] == list(range(6))
    assert [t.line for t in doc.tokens] == [1, 1, 1, 3, 3, 3]


def test_previous_holds_leading_text_of_first_token_on_line() -> None:
    doc = RegexTokenizer().tokenize(b" * Licensed under\n// the Apache License")

    assert doc.tokens[0].previous == "*"
    assert doc.tokens[1].previous == ""
    assert doc.tokens[2].text == "the"
    assert doc.tokens[2].previous == "//"


def test_case_is_preserved_when_lowercasing_disabled() -> None:
    doc = RegexTokenizer(TokenizerConfig(lowercase=False)).tokenize(b"MIT License")

    assert [t.text for t in doc.tokens] == ["MIT", "License"]


def test_empty_content_yields_empty_document() -> None:
    assert len(RegexTokenizer().tokenize(b"")) == 0


def test_form_feed_does_not_start_a_new_line() -> None:
    doc = RegexTokenizer().tokenize(b"end of terms\x0cHow to apply\r\nlast\rline\x0bstill")

    lines = {t.text: t.line for t in doc.tokens}
    assert lines["how"] == 1
    assert lines["last"] == 2
    assert lines["line"] == 3
    assert lines["still"] == 3

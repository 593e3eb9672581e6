"""Tests for LexicalTextSimilarity."""

import pytest

from src.domain.services.lexical_similarity import LexicalTextSimilarity


@pytest.fixture
def text() -> LexicalTextSimilarity:
    return LexicalTextSimilarity()


def test_normalize(text: LexicalTextSimilarity) -> None:
    assert text.normalize("  Uses Bcrypt For Hashing \n") == "uses bcrypt for hashing"


def test_contains_fragment_is_case_insensitive(text: LexicalTextSimilarity) -> None:
    assert text.contains_fragment("Found an SQL Injection here", "sql injection", 30)


def test_contains_fragment_uses_prefix_only(text: LexicalTextSimilarity) -> None:
    assert text.contains_fragment("token expiry", "Token expiry is never checked", 12)
    assert not text.contains_fragment("token expiry", "Token expiry is never checked", 20)


def test_word_overlap_ignores_short_words(text: LexicalTextSimilarity) -> None:
    assert text.word_overlap("the sql api", "the sql api") == 0.0


def test_word_overlap_jaccard(text: LexicalTextSimilarity) -> None:
    a = "SQL injection risk. User input concatenated"
    b = "SQL injection. Input passed unescaped"
    assert text.word_overlap(a, b) == pytest.approx(2 / 7)


def test_word_overlap_identical(text: LexicalTextSimilarity) -> None:
    assert text.word_overlap("Missing input validation", "missing INPUT validation") == 1.0

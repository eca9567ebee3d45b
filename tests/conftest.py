"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from rdlex.lexer import Lexer, tokenize
from rdlex.tokens import STANDARD_CONFIG, LexerConfig, Tag, Token


@pytest.fixture
def lexer():
    """Return a Lexer using the standard breakers and keywords."""
    return Lexer(STANDARD_CONFIG)


@pytest.fixture
def lex():
    """Return a helper that tokenizes source with an optional config."""

    def _lex(source: str, config: LexerConfig = STANDARD_CONFIG) -> list[Token]:
        return tokenize(source, config)

    return _lex


def assert_tags(tokens: list[Token], expected: list[Tag]) -> None:
    """Assert that the token tags match the expected list."""
    actual = [t.tag for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"

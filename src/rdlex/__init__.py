"""rdlex: a hand-built lexer and two recursive descent recognizers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rdlex.tokens import Token

__version__ = "0.1.0"


def lex(source: str) -> list[Token]:
    """Tokenize source text with the standard breakers and keywords."""
    from rdlex.lexer import tokenize

    return tokenize(source)

"""rdlex parsers: recursive descent recognizers for two small grammars.

Both parsers walk a token sequence left to right with one token of
lookahead. They differ in how they fail:

- ``PrefixParser`` (``S -> + S S | - S S | a``) fails fast and raises
  ``ParseError`` on the first unexpected token.
- ``BracketParser`` (``S -> 0 E 1``, ``E -> S | ε``) tolerates mismatches
  while matching and reports a ``ParseOutcome`` once parsing stops.
"""

from __future__ import annotations

from collections.abc import Iterable

from rdlex.errors import ParseError, ParseOutcome, token_text
from rdlex.lexer import tokenize
from rdlex.tokens import BRACKET_CONFIG, STANDARD_CONFIG, LexerConfig, Token


class ParserState:
    """Cursor over an owned token sequence.

    The lookahead is the token at the cursor; ``remaining`` is everything
    after it. Advancing moves an index, nothing is removed.
    """

    def __init__(self, tokens: Iterable[Token | str]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0

    @property
    def lookahead(self) -> Token | str | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    @property
    def lookahead_text(self) -> str | None:
        return token_text(self.lookahead)

    @property
    def remaining(self) -> tuple[Token | str, ...]:
        return self._tokens[self._pos + 1 :]

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def advance(self) -> Token | str | None:
        """Consume the lookahead and return it; a no-op at end of input."""
        tok = self.lookahead
        if tok is not None:
            self._pos += 1
        return tok


class PrefixParser:
    """Fail-fast recognizer for prefix expressions over ``+``, ``-`` and ``a``."""

    def __init__(self, tokens: Iterable[Token | str]) -> None:
        self._state = ParserState(tokens)

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def lookahead(self) -> Token | str | None:
        return self._state.lookahead

    def parse(self) -> None:
        """Parse a whole program: one statement that consumes every token."""
        self.stmt()
        if not self._state.at_end():
            raise ParseError("syntax error: unexpected trailing token", self.lookahead)

    def stmt(self) -> None:
        text = self._state.lookahead_text
        if text is None:
            return

        if text in ("+", "-"):
            self.match(text)
            self._operand()
            self._operand()
        elif text == "a":
            self.match("a")
        else:
            raise ParseError("syntax error", self.lookahead)

    def _operand(self) -> None:
        # An operator's operands are required; only the top level may be empty.
        if self._state.at_end():
            raise ParseError("syntax error: missing operand")
        self.stmt()

    def match(self, expected: str) -> None:
        if self._state.lookahead_text != expected:
            raise ParseError(f"syntax error: expected {expected!r}", self.lookahead)
        self._state.advance()


class BracketParser:
    """Permissive recognizer for balanced ``0 ... 1`` nests.

    Mismatches at the match step are skipped silently. ``parse()`` rejects
    the input when tokens are left over, or when a terminal was still
    expected after the input ran out.
    """

    def __init__(self, tokens: Iterable[Token | str]) -> None:
        self._state = ParserState(tokens)
        self._ran_out = False

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def lookahead(self) -> Token | str | None:
        return self._state.lookahead

    def parse(self) -> ParseOutcome:
        self.stmt()
        if not self._state.at_end():
            return ParseOutcome.reject(self.lookahead)
        if self._ran_out:
            return ParseOutcome.reject(None)
        return ParseOutcome.accept()

    def stmt(self) -> None:
        if self._state.lookahead_text == "0":
            self.match("0")
            self.optexpr()
            self.match("1")

    def optexpr(self) -> None:
        if self._state.lookahead_text == "0":
            self.stmt()

    def match(self, expected: str) -> None:
        text = self._state.lookahead_text
        if text is None:
            self._ran_out = True
        elif text == expected:
            self._state.advance()


def parse_prefix(
    source: str | Iterable[Token | str], config: LexerConfig = STANDARD_CONFIG
) -> None:
    """Validate a prefix expression; raises ParseError on the first violation."""
    tokens = tokenize(source, config) if isinstance(source, str) else source
    PrefixParser(tokens).parse()


def parse_bracket(
    source: str | Iterable[Token | str], config: LexerConfig = BRACKET_CONFIG
) -> ParseOutcome:
    """Validate a bracket nest and report the outcome without raising."""
    tokens = tokenize(source, config) if isinstance(source, str) else source
    return BracketParser(tokens).parse()

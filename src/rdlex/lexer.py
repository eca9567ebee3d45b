"""rdlex lexer: scans lines into raw tokens, drops comments, and tags them."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from rdlex.tokens import STANDARD_CONFIG, LexerConfig, Tag, Token, breaker_tag

_INTEGER_RE = re.compile(r"-?[0-9]+")

COMMENT_CHAR = "/"


class Lexer:
    """Tokenize lines of text into tagged Token objects."""

    def __init__(self, config: LexerConfig = STANDARD_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> LexerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Scanner
    # ------------------------------------------------------------------

    def scan(self, line: str) -> list[str]:
        """Split one line into raw token strings."""
        return [text for _, text in self.scan_spans(line)]

    def scan_spans(self, line: str) -> list[tuple[int, str]]:
        """Split one line into (0-based offset, raw token string) pairs.

        A token is a maximal run of characters that are neither whitespace
        nor breakers. A breaker ends the token in progress; when a token
        would start on a breaker, that character alone is the token.
        """
        tokens: list[tuple[int, str]] = []
        pos = 0
        length = len(line)

        while pos < length:
            # Skip leading whitespace
            while pos < length and line[pos].isspace():
                pos += 1
            if pos >= length:
                break

            start = pos
            while pos < length and not line[pos].isspace():
                if self._config.is_breaker(line[pos]):
                    if pos == start:
                        pos += 1
                    break
                pos += 1

            tokens.append((start, line[start:pos]))

        return tokens

    # ------------------------------------------------------------------
    # Classifier
    # ------------------------------------------------------------------

    def classify(self, text: str) -> Tag:
        """Map a raw token string to its tag. Never fails."""
        if _INTEGER_RE.fullmatch(text):
            return Tag.NUMBER

        if len(text) == 1:
            tag = breaker_tag(text)
            if tag is not None:
                return tag
        elif text in self._config.keywords:
            return Tag.KEYWORD_FLAG

        return Tag.IDENTIFIER

    # ------------------------------------------------------------------
    # Token stream
    # ------------------------------------------------------------------

    def iter_tokens(self, lines: Iterable[str]) -> Iterator[Token]:
        """Lazily yield tagged tokens for each line, numbering lines from 1."""
        for line_number, line in enumerate(lines, start=1):
            spans = self.scan_spans(line)
            kept = filter_line_comments([text for _, text in spans])
            for start, text in spans[: len(kept)]:
                yield Token(line_number, text, self.classify(text), start + 1)

    def tokenize(self, lines: Iterable[str]) -> list[Token]:
        """Tokenize all lines and return the token list."""
        return list(self.iter_tokens(lines))


def filter_line_comments(tokens: list[str]) -> list[str]:
    """Truncate a line's raw tokens at the first ``//`` comment marker.

    The marker is two consecutive ``/`` tokens; the first of them and
    everything after it are dropped. A lone ``/`` is kept.
    """
    for i in range(len(tokens) - 1):
        if tokens[i] == COMMENT_CHAR and tokens[i + 1] == COMMENT_CHAR:
            return tokens[:i]
    return tokens


def tokenize(source: str | Iterable[str], config: LexerConfig = STANDARD_CONFIG) -> list[Token]:
    """Convenience function: tokenize a string or an iterable of lines."""
    lines = source.splitlines() if isinstance(source, str) else source
    return Lexer(config).tokenize(lines)

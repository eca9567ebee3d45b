"""Token report: one line per token."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from rdlex.tokens import Token


def format_token(token: Token) -> str:
    return f"Line {token.line_number} token {token.text} tag {token.tag.display_name}"


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> int:
    """Write a report line for each token to *file* and return the count."""
    count = 0
    for token in tokens:
        file.write(format_token(token) + "\n")
        count += 1
    return count

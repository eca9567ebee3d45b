"""Parse error and parse outcome types."""

from __future__ import annotations

from dataclasses import dataclass

from rdlex.tokens import Token

SYNTAX_ERROR = "Syntax Error"


def token_text(token: Token | str | None) -> str | None:
    """Return the text of a Token or plain string, None at end of input."""
    if isinstance(token, Token):
        return token.text
    return token


def token_line(token: Token | str | None) -> int | None:
    if isinstance(token, Token):
        return token.line_number
    return None


class ParseError(Exception):
    """Raised on the first grammar violation; aborts the parse."""

    def __init__(self, message: str, token: Token | str | None = None) -> None:
        self.message = message
        self.token = token
        super().__init__(self._summary())

    @property
    def line(self) -> int | None:
        """1-based line of the offending token, None if unknown or at end of input."""
        return token_line(self.token)

    def _summary(self) -> str:
        text = token_text(self.token)
        if text is None:
            return f"{self.message} at end of input"
        return f"{self.message} at {text!r}"

    def format(self, filename: str = "input", source: str | None = None) -> str:
        """Render the error with the offending source line when it is known."""
        line = self.line
        if line is None:
            return f"error: {self._summary()}\n  --> {filename}"

        line_num = str(line)
        gutter_width = len(line_num) + 1
        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        result = f"error: {self._summary()}\n{' ' * gutter_width}--> {filename}:{line}"
        if source is None:
            return result

        lines = source.splitlines()
        source_line = lines[line - 1] if 0 < line <= len(lines) else ""

        text = token_text(self.token) or ""
        if isinstance(self.token, Token) and self.token.column > 0:
            col = self.token.column - 1
        else:
            # No column recorded, so point at the first occurrence of the text
            col = max(0, source_line.find(text)) if text else 0
        carets = "^" * max(1, len(text))

        return (
            f"{result}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {' ' * col}{carets}"
        )


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of a parse that reports failure instead of raising."""

    accepted: bool
    message: str | None = None
    token: Token | str | None = None

    def __bool__(self) -> bool:
        return self.accepted

    @property
    def line(self) -> int | None:
        return token_line(self.token)

    @classmethod
    def accept(cls) -> ParseOutcome:
        return cls(True)

    @classmethod
    def reject(cls, token: Token | str | None, message: str = SYNTAX_ERROR) -> ParseOutcome:
        return cls(False, message, token)

"""Token tags, data structures, and lexer configuration presets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Tag(Enum):
    """Semantic tag of a token. The value is the display name."""

    # Content
    NUMBER = "Number"
    IDENTIFIER = "Identifier"
    KEYWORD_FLAG = "KeywordFlag"  # any keyword; true and false are not told apart

    # Punctuation (single-character)
    SEMICOLON = "Semicolon"  # ;
    BACKSLASH = "Backslash"  # \
    EQUALS = "Equals"  # =
    MINUS = "Minus"  # -
    PLUS = "Plus"  # +
    ASTERISK = "Asterisk"  # *
    FORWARD_SLASH = "ForwardSlash"  # /
    QUESTION_MARK = "QuestionMark"  # ?
    LEFT_BRACKET = "LeftBracket"  # [
    RIGHT_BRACKET = "RightBracket"  # ]
    LEFT_BRACE = "LeftBrace"  # {
    RIGHT_BRACE = "RightBrace"  # }
    LEFT_PAREN = "LeftParen"  # (
    RIGHT_PAREN = "RightParen"  # )
    SINGLE_QUOTE = "SingleQuote"  # '
    DOUBLE_QUOTE = "DoubleQuote"  # "
    COLON = "Colon"  # :
    LESS_THAN = "LessThan"  # <
    GREATER_THAN = "GreaterThan"  # >
    AMPERSAND = "Ampersand"  # &

    # Declared but never produced by classification
    NONE = "None"

    @property
    def display_name(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_BREAKER_TAGS: dict[str, Tag] = {
    "(": Tag.LEFT_PAREN,
    ")": Tag.RIGHT_PAREN,
    "{": Tag.LEFT_BRACE,
    "}": Tag.RIGHT_BRACE,
    "[": Tag.LEFT_BRACKET,
    "]": Tag.RIGHT_BRACKET,
    "?": Tag.QUESTION_MARK,
    "/": Tag.FORWARD_SLASH,
    "<": Tag.LESS_THAN,
    ">": Tag.GREATER_THAN,
    "*": Tag.ASTERISK,
    "+": Tag.PLUS,
    "-": Tag.MINUS,
    "=": Tag.EQUALS,
    "'": Tag.SINGLE_QUOTE,
    '"': Tag.DOUBLE_QUOTE,
    "\\": Tag.BACKSLASH,
    ";": Tag.SEMICOLON,
    ":": Tag.COLON,
    "&": Tag.AMPERSAND,
}


def breaker_tag(ch: str) -> Tag | None:
    """Return the punctuation tag for a single character, or None."""
    return _BREAKER_TAGS.get(ch)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified token, its 1-based line, and its 1-based column (0 if unknown)."""

    line_number: int
    text: str
    tag: Tag
    column: int = 0


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Breaker characters and keywords, fixed for the lifetime of a lexer."""

    symbol_breakers: frozenset[str]
    keywords: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        for ch in self.symbol_breakers:
            if len(ch) != 1:
                raise ValueError(f"symbol breaker must be a single character, got {ch!r}")

    @classmethod
    def from_strings(cls, breakers: Iterable[str], keywords: Iterable[str] = ()) -> LexerConfig:
        """Build a config from a breaker string (or iterable) and keywords."""
        return cls(frozenset(breakers), frozenset(keywords))

    def is_breaker(self, ch: str) -> bool:
        return ch in self.symbol_breakers


STANDARD_BREAKERS = "&(){}[]?/<>*+-='\"\\:;"

STANDARD_KEYWORDS = (
    "int",
    "for",
    "while",
    "and",
    "bool",
    "if",
    "or",
    "return",
    "true",
    "false",
)

STANDARD_CONFIG = LexerConfig.from_strings(STANDARD_BREAKERS, STANDARD_KEYWORDS)

# Each 0 and 1 is its own token, so "0011" scans as four tokens.
BRACKET_CONFIG = LexerConfig.from_strings("01")

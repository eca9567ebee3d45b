"""Test parse error formatting and parse outcomes."""

import pytest

from rdlex.errors import ParseError, ParseOutcome
from rdlex.parser import parse_prefix
from rdlex.tokens import Tag, Token


class TestParseErrorMessage:
    def test_str_names_token(self):
        err = ParseError("syntax error", Token(1, "b", Tag.IDENTIFIER))
        assert str(err) == "syntax error at 'b'"

    def test_str_at_end_of_input(self):
        err = ParseError("syntax error: missing operand")
        assert str(err) == "syntax error: missing operand at end of input"

    def test_plain_string_token_has_no_line(self):
        err = ParseError("syntax error", "b")
        assert err.line is None
        assert str(err) == "syntax error at 'b'"


class TestParseErrorFormat:
    def test_format_without_source(self):
        err = ParseError("syntax error", Token(4, "b", Tag.IDENTIFIER))
        formatted = err.format("prog.txt")
        assert formatted.startswith("error:")
        assert "--> prog.txt:4" in formatted

    def test_format_with_source_points_at_token(self):
        source = "+ a\n+ a b"
        with pytest.raises(ParseError) as exc_info:
            parse_prefix(source)
        formatted = exc_info.value.format("prog.txt", source)
        lines = formatted.splitlines()
        assert "--> prog.txt:2" in lines[1]
        assert lines[3] == "2 | + a b"
        assert lines[4] == "  |     ^"

    def test_format_points_at_repeated_token(self):
        source = "+ a a a"
        with pytest.raises(ParseError) as exc_info:
            parse_prefix(source)
        assert exc_info.value.token.column == 7
        lines = exc_info.value.format("prog.txt", source).splitlines()
        assert lines[3] == "1 | + a a a"
        assert lines[4] == "  |       ^"

    def test_format_at_end_of_input(self):
        with pytest.raises(ParseError) as exc_info:
            parse_prefix("+ a")
        formatted = exc_info.value.format("prog.txt", "+ a")
        assert formatted == "error: syntax error: missing operand at end of input\n  --> prog.txt"


class TestParseOutcome:
    def test_accept_is_truthy(self):
        outcome = ParseOutcome.accept()
        assert outcome
        assert outcome.line is None

    def test_reject_is_falsy(self):
        outcome = ParseOutcome.reject(Token(7, "1", Tag.NUMBER))
        assert not outcome
        assert outcome.message == "Syntax Error"
        assert outcome.line == 7

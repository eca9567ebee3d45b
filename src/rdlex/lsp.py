"""Minimal LSP server for rdlex grammars: diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from rdlex import __version__
from rdlex.errors import ParseError
from rdlex.lexer import tokenize
from rdlex.parser import BracketParser, PrefixParser
from rdlex.tokens import BRACKET_CONFIG, STANDARD_CONFIG

server = LanguageServer("rdlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

GRAMMAR_SUFFIXES = {
    ".prefix": "prefix",
    ".brk": "bracket",
}


def grammar_for_uri(uri: str) -> str | None:
    """Return the grammar name for a document URI, or None if it has none."""
    name = uri.rsplit("/", 1)[-1]
    for suffix, grammar in GRAMMAR_SUFFIXES.items():
        if name.endswith(suffix):
            return grammar
    return None


def _line_range(lines: list[str], line: int | None) -> Range:
    """Range covering a whole 1-based line; the last line when line is None."""
    if line is None:
        line = max(1, len(lines))
    idx = line - 1
    text = lines[idx] if 0 <= idx < len(lines) else ""
    return Range(
        start=Position(line=idx, character=0),
        end=Position(line=idx, character=len(text)),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize and parse the document, then publish diagnostics."""
    grammar = grammar_for_uri(uri)
    doc = ls.workspace.get_text_document(uri)
    lines = doc.source.splitlines()
    diagnostics: list[Diagnostic] = []

    if grammar == "prefix":
        try:
            PrefixParser(tokenize(lines, STANDARD_CONFIG)).parse()
        except ParseError as exc:
            diagnostics.append(
                Diagnostic(
                    range=_line_range(lines, exc.line),
                    message=str(exc),
                    severity=DiagnosticSeverity.Error,
                    source="rdlex",
                )
            )
    elif grammar == "bracket":
        outcome = BracketParser(tokenize(lines, BRACKET_CONFIG)).parse()
        if not outcome:
            diagnostics.append(
                Diagnostic(
                    range=_line_range(lines, outcome.line),
                    message=outcome.message or "",
                    severity=DiagnosticSeverity.Warning,
                    source="rdlex",
                )
            )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()

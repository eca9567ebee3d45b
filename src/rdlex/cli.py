"""Command-line interface for rdlex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from rdlex.errors import ParseError
from rdlex.tokens import BRACKET_CONFIG, STANDARD_CONFIG, LexerConfig

COMMANDS = ("tokens", "prefix", "bracket")

CONFIG_NAME = "rdlex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    command: str
    input_file: Path | None  # None reads stdin
    config: LexerConfig
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="rdlex",
        description="Tokenize text and check it against small recursive descent grammars",
    )
    p.add_argument(
        "command",
        choices=COMMANDS,
        help="tokens: print the token report; prefix/bracket: validate against a grammar",
    )
    p.add_argument("input", help="Input file ('-' for stdin)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--breakers",
        metavar="CHARS",
        help="Symbol breaker characters (replaces the configured set)",
    )
    p.add_argument(
        "-k",
        "--keyword",
        action="append",
        default=[],
        metavar="WORD",
        help="Keyword (repeatable, replaces the configured set)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr before parsing")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge the preset, config file and CLI args into CliOptions.

    Precedence: preset < config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    preset = BRACKET_CONFIG if args.command == "bracket" else STANDARD_CONFIG
    breakers: str | frozenset[str] = preset.symbol_breakers
    keywords: list[str] | frozenset[str] = preset.keywords

    # Lexer settings: config < CLI
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_breakers = cfg_lexer.get("breakers")
        if isinstance(cfg_breakers, str):
            breakers = cfg_breakers
        elif cfg_breakers is not None:
            raise argparse.ArgumentTypeError("lexer.breakers must be a string")
        cfg_keywords = cfg_lexer.get("keywords")
        if isinstance(cfg_keywords, list):
            keywords = [str(k) for k in cfg_keywords]
        elif cfg_keywords is not None:
            raise argparse.ArgumentTypeError("lexer.keywords must be a list of strings")

    if args.breakers is not None:
        breakers = args.breakers
    if args.keyword:
        keywords = list(args.keyword)

    try:
        lexer_config = LexerConfig.from_strings(breakers, keywords)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    return CliOptions(
        command=args.command,
        input_file=input_file,
        config=lexer_config,
        debug=args.debug,
    )


def read_source(options: CliOptions) -> str:
    if options.input_file is None:
        return sys.stdin.read()
    return options.input_file.read_text(encoding="utf-8")


def run(options: CliOptions, stdout: TextIO, stderr: TextIO) -> int:
    """Tokenize the input and run the selected command. Returns exit code."""
    from rdlex.lexer import Lexer
    from rdlex.parser import BracketParser, PrefixParser
    from rdlex.report import dump_tokens

    source = read_source(options)
    filename = str(options.input_file) if options.input_file is not None else "<stdin>"
    tokens = Lexer(options.config).tokenize(source.splitlines())

    if options.command == "tokens":
        dump_tokens(tokens, file=stdout)
        return 0

    if options.debug:
        dump_tokens(tokens, file=stderr)

    if options.command == "prefix":
        try:
            PrefixParser(tokens).parse()
        except ParseError as exc:
            print(exc.format(filename, source), file=stderr)
            return 1
    else:
        outcome = BracketParser(tokens).parse()
        if not outcome:
            where = f"{filename}:{outcome.line}" if outcome.line is not None else filename
            print(f"{outcome.message}\n  --> {where}", file=stderr)
            return 1

    print(f"{filename}: accepted", file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    try:
        return run(options, sys.stdout, sys.stderr)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

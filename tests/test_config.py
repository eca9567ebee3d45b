"""Tests for TOML config file loading and option precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from rdlex.cli import build_parser, load_config, main, resolve_options
from rdlex.tokens import BRACKET_CONFIG, STANDARD_CONFIG


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[lexer]\nbreakers = "+-"\n')
        result = load_config(cfg, tmp_path)
        assert result["lexer"] == {"breakers": "+-"}

    def test_auto_discover_rdlex_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "rdlex.toml"
        cfg.write_text('[lexer]\nkeywords = ["let"]\n')
        result = load_config(None, tmp_path)
        assert result["lexer"] == {"keywords": ["let"]}


class TestPresets:
    def test_standard_for_tokens(self, tmp_path: Path) -> None:
        doc = tmp_path / "p.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args(["tokens", str(doc)]))
        assert opts.config == STANDARD_CONFIG
        assert opts.input_file == doc

    def test_bracket_for_bracket(self, tmp_path: Path) -> None:
        doc = tmp_path / "p.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args(["bracket", str(doc)]))
        assert opts.config == BRACKET_CONFIG

    def test_stdin_input(self) -> None:
        opts = resolve_options(build_parser().parse_args(["tokens", "-"]))
        assert opts.input_file is None


class TestConfigMerge:
    def test_config_overrides_preset(self, tmp_path: Path) -> None:
        (tmp_path / "rdlex.toml").write_text('[lexer]\nbreakers = ";"\nkeywords = ["let"]\n')
        doc = tmp_path / "p.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args(["tokens", str(doc)]))
        assert opts.config.symbol_breakers == frozenset({";"})
        assert opts.config.keywords == frozenset({"let"})

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "rdlex.toml").write_text('[lexer]\nbreakers = ";"\nkeywords = ["let"]\n')
        doc = tmp_path / "p.txt"
        doc.write_text("")
        args = build_parser().parse_args(
            ["tokens", str(doc), "--breakers", "()", "-k", "fn", "-k", "var"]
        )
        opts = resolve_options(args)
        assert opts.config.symbol_breakers == frozenset({"(", ")"})
        assert opts.config.keywords == frozenset({"fn", "var"})

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[lexer]\nkeywords = []\n')
        doc = tmp_path / "p.txt"
        doc.write_text("")
        args = build_parser().parse_args(["tokens", str(doc), "--config", str(cfg)])
        assert resolve_options(args).config.keywords == frozenset()

    def test_bad_breakers_type(self, tmp_path: Path) -> None:
        import argparse

        (tmp_path / "rdlex.toml").write_text("[lexer]\nbreakers = 5\n")
        doc = tmp_path / "p.txt"
        doc.write_text("")
        with pytest.raises(argparse.ArgumentTypeError):
            resolve_options(build_parser().parse_args(["tokens", str(doc)]))


class TestConfigEndToEnd:
    def test_config_changes_tokens(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "rdlex.toml").write_text('[lexer]\nkeywords = ["let"]\n')
        doc = tmp_path / "p.txt"
        doc.write_text("let int\n")
        assert main(["tokens", str(doc)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Line 1 token let tag KeywordFlag",
            "Line 1 token int tag Identifier",
        ]

    def test_invalid_toml_returns_2(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "rdlex.toml").write_text("[lexer\n")
        doc = tmp_path / "p.txt"
        doc.write_text("")
        assert main(["tokens", str(doc)]) == 2
        assert "invalid config" in capsys.readouterr().err

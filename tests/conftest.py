"""Shared helpers for building Perl document trees by hand."""

from pathlib import Path

import pytest

from gotocritic.tree import (
    Block,
    BreakStatement,
    Cast,
    CompoundStatement,
    Document,
    Label,
    Punctuation,
    Statement,
    SubStatement,
    Symbol,
    Whitespace,
    Word,
)

FIXTURES = Path(__file__).parent / "fixtures"


def ws(text: str = " ") -> Whitespace:
    return Whitespace(text)


def goto(target: str, line: int | None = None, column: int | None = None) -> BreakStatement:
    """``goto TARGET;``"""
    return BreakStatement(Word("goto", line, column), ws(), Word(target), Punctuation(";"))


def goto_sub(name: str) -> BreakStatement:
    """``goto &name;``"""
    return BreakStatement(Word("goto"), ws(), Cast("&"), Word(name), Punctuation(";"))


def goto_var(name: str) -> BreakStatement:
    """``goto $name;``"""
    return BreakStatement(Word("goto"), ws(), Symbol(f"${name}"), Punctuation(";"))


def loop_control(keyword: str, target: str) -> BreakStatement:
    """``last TARGET;`` and friends."""
    return BreakStatement(Word(keyword), ws(), Word(target), Punctuation(";"))


def label(name: str) -> Statement:
    """A label with no statement after it: ``FOO:``"""
    return Statement(Label(f"{name}:"))


def labelled_block(name: str, *statements) -> CompoundStatement:
    """``NAME: { ... }``"""
    return CompoundStatement(Label(f"{name}:"), ws(), Block(*statements))


def bare_block(*statements) -> CompoundStatement:
    """``{ ... }``"""
    return CompoundStatement(Block(*statements))


def sub(name: str, *statements) -> SubStatement:
    """``sub NAME { ... }``"""
    return SubStatement(Word("sub"), ws(), Word(name), ws(), Block(*statements))


def document(*children, filename: str | None = None) -> Document:
    return Document(*children, filename=filename)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES

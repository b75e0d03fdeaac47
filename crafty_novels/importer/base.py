"""Importer interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from crafty_novels.syntax.tokens import Token


@runtime_checkable
class Importer(Protocol):
    """Turns source text of one format into a token list."""

    format_name: str

    def tokenize(self, text: str) -> list[Token]: ...

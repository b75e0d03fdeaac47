"""Exception hierarchy for crafty_novels."""

from __future__ import annotations

from typing import Any


class CraftyNovelsError(Exception):
    """Base class for every error raised by crafty_novels."""


class DecodeError(CraftyNovelsError):
    """Input bytes could not be decoded as UTF-8."""

    def __init__(self, source: str, cause: UnicodeDecodeError) -> None:
        self.source = source
        self.position = cause.start
        super().__init__(
            f"{source} is not valid UTF-8 (byte offset {cause.start}): {cause.reason}"
        )
        self.__cause__ = cause


class UnmappedTokenKind(CraftyNovelsError):
    """An exporter met a style kind it has no output mapping for."""

    def __init__(self, kind: Any, exporter: str) -> None:
        self.kind = kind
        self.exporter = exporter
        super().__init__(f"{exporter} exporter has no mapping for style kind {kind!r}")


class TokenSequenceError(CraftyNovelsError):
    """A token sequence breaks one of the token model invariants."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"token {index}: {message}"
        super().__init__(message)


class UnknownFormatError(CraftyNovelsError):
    """No importer or exporter is registered under the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unsupported format: {name!r}. Supported: {', '.join(available)}"
        )

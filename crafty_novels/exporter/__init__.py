"""Exporters: tokens to output formats."""

from crafty_novels.config.models import CraftyConfig
from crafty_novels.errors import UnknownFormatError
from crafty_novels.exporter.base import BaseExporter, Exporter, TokenRenderer
from crafty_novels.exporter.debug import DebugExporter
from crafty_novels.exporter.html import HTML_STYLE_TAGS, HtmlExporter, style_tags

_EXPORTER_MAP: dict[str, type[BaseExporter]] = {
    "html": HtmlExporter,
    "debug": DebugExporter,
}


def get_exporter(name: str, config: CraftyConfig | None = None) -> Exporter:
    """Create the exporter registered under `name`, configured from `config`."""
    cls = _EXPORTER_MAP.get(name.lower())
    if cls is None:
        raise UnknownFormatError(name, available_formats())

    if cls is HtmlExporter:
        return HtmlExporter(config.html if config is not None else None)
    return cls()


def available_formats() -> list[str]:
    return sorted(_EXPORTER_MAP)


__all__ = [
    "BaseExporter",
    "DebugExporter",
    "Exporter",
    "HTML_STYLE_TAGS",
    "HtmlExporter",
    "TokenRenderer",
    "available_formats",
    "get_exporter",
    "style_tags",
]

"""Book conversion subsystem: import, export, report."""

from crafty_novels.converter.converter import BookConverter, count_pages
from crafty_novels.converter.models import ConversionResult

__all__ = [
    "BookConverter",
    "ConversionResult",
    "count_pages",
]

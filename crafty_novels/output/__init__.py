"""Output subsystem: writes rendered books."""

from crafty_novels.output.writer import FORMAT_EXTENSIONS, DocumentWriter, default_output_path

__all__ = [
    "DocumentWriter",
    "FORMAT_EXTENSIONS",
    "default_output_path",
]

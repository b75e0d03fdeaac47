"""Pydantic models for the conversion subsystem."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
    """Result of converting one book."""

    source_path: str
    output: str
    format: str  # html, debug, etc.
    title: str | None = None
    author: str | None = None
    page_count: int = Field(default=0, ge=0)
    token_count: int = Field(default=0, ge=0)

"""Tests for crafty_novels.syntax: tokens, Minecraft formatting, validation."""

from __future__ import annotations

import dataclasses

import pytest

from crafty_novels.errors import TokenSequenceError
from crafty_novels.syntax import (
    FORMAT_CODES,
    RESET,
    Color,
    Frontmatter,
    LineBreak,
    PageBreak,
    Rgb,
    Style,
    StyleEnd,
    StyleStart,
    Text,
    Token,
    format_code,
    lookup_format_code,
    validate_tokens,
)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


class TestTokens:
    def test_equality_by_value(self):
        assert Text("a") == Text("a")
        assert Text("a") != Text("b")
        assert StyleStart(Style.bold) == StyleStart(Style.bold)
        assert StyleStart(Style.bold) != StyleEnd(Style.bold)

    def test_structural_tokens_differ_by_type(self):
        assert PageBreak() == PageBreak()
        assert PageBreak() != LineBreak()

    def test_tokens_are_frozen(self):
        token = Text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.content = "b"  # type: ignore[misc]

    def test_all_variants_share_base(self):
        for token in (Text(""), StyleStart(Style.bold), StyleEnd(Style.bold), PageBreak(),
                      LineBreak(), Frontmatter()):
            assert isinstance(token, Token)

    def test_describe(self):
        assert Text("hi").describe() == "Text('hi')"
        assert StyleStart(Style.italic).describe() == "StyleStart(italic)"
        assert StyleEnd(Color.gold).describe() == "StyleEnd(color:gold)"
        assert PageBreak().describe() == "PageBreak"

    def test_frontmatter_properties(self):
        fm = Frontmatter(fields={"title": "Book", "author": "Steve"})
        assert fm.title == "Book"
        assert fm.author == "Steve"
        assert Frontmatter().title is None

    def test_frontmatter_hashable(self):
        a = Frontmatter(fields={"title": "x", "author": "y"})
        b = Frontmatter(fields={"author": "y", "title": "x"})
        assert a == b
        assert hash(a) == hash(b)


# ---------------------------------------------------------------------------
# Minecraft formatting
# ---------------------------------------------------------------------------


class TestColor:
    def test_sixteen_colors(self):
        assert len(Color) == 16

    def test_codes_are_unique(self):
        codes = [c.code for c in Color]
        assert len(set(codes)) == 16
        assert set(codes) == set("0123456789abcdef")

    def test_gold_values(self):
        assert Color.gold.code == "6"
        assert Color.gold.fg == Rgb(255, 170, 0)
        assert Color.gold.bg == Rgb(42, 42, 0)

    def test_str_is_foreground_hex(self):
        assert str(Color.blue) == "#5555FF"
        assert str(Color.blue.bg) == "#15153F"

    def test_rgb_hex_pads_channels(self):
        assert Rgb(0, 0, 170).hex == "0000AA"
        assert Rgb(0, 0, 170).as_tuple() == (0, 0, 170)

    def test_rgb_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            Rgb(256, 0, 0)


class TestFormatCodes:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("k", Style.obfuscated),
            ("l", Style.bold),
            ("m", Style.strikethrough),
            ("n", Style.underline),
            ("o", Style.italic),
            ("c", Color.red),
            ("0", Color.black),
        ],
    )
    def test_lookup(self, code, expected):
        assert lookup_format_code(code) is expected

    def test_lookup_reset(self):
        assert lookup_format_code("r") is RESET

    def test_lookup_is_case_insensitive(self):
        assert lookup_format_code("L") is Style.bold
        assert lookup_format_code("C") is Color.red

    def test_unknown_code(self):
        assert lookup_format_code("z") is None
        assert lookup_format_code(" ") is None

    def test_inverse_mapping(self):
        for code, kind in FORMAT_CODES.items():
            assert format_code(kind) == f"§{code}"

    def test_every_style_has_a_code(self):
        for style in Style:
            assert format_code(style).startswith("§")


# ---------------------------------------------------------------------------
# validate_tokens
# ---------------------------------------------------------------------------


class TestValidateTokens:
    def test_valid_sequence(self):
        validate_tokens([
            Frontmatter(fields={"title": "t"}),
            PageBreak(),
            StyleStart(Style.bold),
            StyleStart(Color.red),
            Text("x"),
            StyleEnd(Color.red),
            StyleEnd(Style.bold),
        ])

    def test_empty_sequence(self):
        validate_tokens([])

    def test_frontmatter_not_first(self):
        with pytest.raises(TokenSequenceError) as exc_info:
            validate_tokens([Text("x"), Frontmatter()])
        assert exc_info.value.index == 1

    def test_duplicate_frontmatter(self):
        with pytest.raises(TokenSequenceError):
            validate_tokens([Frontmatter(), Frontmatter()])

    def test_dangling_close(self):
        with pytest.raises(TokenSequenceError):
            validate_tokens([StyleEnd(Style.bold)])

    def test_dangling_open(self):
        with pytest.raises(TokenSequenceError):
            validate_tokens([StyleStart(Style.bold), Text("x")])

    def test_overlap_rejected_when_strict(self):
        tokens = [
            StyleStart(Style.bold),
            StyleStart(Style.italic),
            StyleEnd(Style.bold),
            StyleEnd(Style.italic),
        ]
        with pytest.raises(TokenSequenceError):
            validate_tokens(tokens)
        validate_tokens(tokens, strict_nesting=False)

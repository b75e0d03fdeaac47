"""Tests for the Stendhal frontmatter parser."""

from crafty_novels.importer.frontmatter import parse_frontmatter
from crafty_novels.syntax import Frontmatter


class TestParseFrontmatter:
    def test_standard_block(self):
        text = "title: crafty_novels\nauthor: RemasteredArch\npages:\n#- The text of the book"
        fm, offset = parse_frontmatter(text)

        assert fm == Frontmatter(fields={"title": "crafty_novels", "author": "RemasteredArch"})
        assert text[offset:] == "#- The text of the book"

    def test_crlf_line_endings(self):
        text = "title: T\r\nauthor: A\r\npages:\r\nbody"
        fm, offset = parse_frontmatter(text)

        assert fm is not None
        assert fm.title == "T"
        assert text[offset:] == "body"

    def test_delimiter_at_end_of_input(self):
        text = "title: T\npages:"
        fm, offset = parse_frontmatter(text)

        assert fm == Frontmatter(fields={"title": "T"})
        assert offset == len(text)

    def test_delimiter_trailing_whitespace(self):
        fm, _ = parse_frontmatter("title: T\npages:   \nbody")
        assert fm is not None

    def test_extra_fields_kept(self):
        fm, _ = parse_frontmatter("title: T\nauthor: A\nsigned: true\npages:\n")
        assert fm.fields == {"title": "T", "author": "A", "signed": "true"}

    def test_values_are_stripped_and_keys_lowercased(self):
        fm, _ = parse_frontmatter("Title:   Spaced Out  \npages:\n")
        assert fm.fields == {"title": "Spaced Out"}

    def test_empty_value(self):
        fm, _ = parse_frontmatter("title:\nauthor: A\npages:\n")
        assert fm.fields == {"title": "", "author": "A"}

    def test_duplicate_keys_last_wins(self):
        fm, _ = parse_frontmatter("title: first\ntitle: second\npages:\n")
        assert fm.title == "second"

    def test_value_may_contain_colons(self):
        fm, _ = parse_frontmatter("title: Part 1: The Start\npages:\n")
        assert fm.title == "Part 1: The Start"


class TestNoFrontmatter:
    def test_plain_body(self):
        assert parse_frontmatter("#- Just a page") == (None, 0)

    def test_empty_input(self):
        assert parse_frontmatter("") == (None, 0)

    def test_body_line_that_is_not_a_field(self):
        assert parse_frontmatter("Once upon a time: there was\n") == (None, 0)

    def test_lone_delimiter_is_not_a_block(self):
        assert parse_frontmatter("pages:\nbody") == (None, 0)


class TestMalformedFrontmatter:
    def test_unterminated_block(self):
        text = "title: T\nauthor: A\n#- body starts without pages:"
        assert parse_frontmatter(text) == (None, 0)

    def test_fields_run_to_end_of_input(self):
        assert parse_frontmatter("title: T\nauthor: A") == (None, 0)

    def test_duplicate_delimiter(self):
        assert parse_frontmatter("title: T\npages:\npages:\nbody") == (None, 0)

    def test_blank_line_inside_block(self):
        assert parse_frontmatter("title: T\n\npages:\n") == (None, 0)

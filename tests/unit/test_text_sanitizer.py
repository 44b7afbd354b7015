"""Tests for answerbot.services.text_sanitizer: README to prompt text."""

from answerbot.services.text_sanitizer import (
    collapse_newlines,
    densify,
    extract_usage,
    sanitize,
    strip_markup,
)

LICENSE = "/**\n * @license Apache-2.0\n *\n * Copyright (c) 2023 The Authors.\n */\n"

# ── sanitize ─────────────────────────────────────────────────────────────────


class TestSanitize:
    def test_strips_license_header(self):
        assert sanitize(LICENSE + "Hello") == "Hello"

    def test_normalizes_crlf(self):
        assert sanitize("a\r\nb") == "a\nb"

    def test_keeps_only_usage_section(self):
        text = (
            "# pkg\n\nIntro text.\n\n"
            '<section class="usage">\n\nUse it like this.\n\n</section>\n\n'
            '<section class="examples">\n\nExample text.\n\n</section>\n'
        )
        result = sanitize(text)
        assert result.strip() == "Use it like this."
        assert "Intro" not in result
        assert "Example" not in result

    def test_first_usage_section_wins(self):
        text = (
            '<section class="usage">first</section>'
            '<section class="usage">second</section>'
        )
        assert sanitize(text) == "first"

    def test_text_without_usage_passes_through(self):
        assert sanitize("Just text.") == "Just text."

    def test_removes_code_blocks(self):
        text = "Text\n```javascript\nvar x = 1;\n```\nMore"
        assert sanitize(text, remove_code=True) == "Text\n\nMore"

    def test_keeps_code_blocks_when_asked(self):
        text = "Text\n```javascript\nvar x = 1;\n```\nMore"
        assert "var x = 1;" in sanitize(text, remove_code=False)

    def test_code_block_removal_is_non_greedy(self):
        text = "a\n```\none\n```\nkeep\n```\ntwo\n```\nb"
        result = sanitize(text)
        assert "keep" in result
        assert "one" not in result
        assert "two" not in result

    def test_removes_link_definitions(self):
        text = "See [foo][bar].\n\n[bar]: https://example.com\n"
        assert sanitize(text) == "See [foo][bar].\n\n"

    def test_removes_html_comments(self):
        assert sanitize("a<!-- hidden -->b") == "ab"

    def test_removes_stray_section_tags(self):
        text = '<section class="intro">Intro</section><section class="notes">Notes</section>'
        assert sanitize(text) == "IntroNotes"

    def test_nested_section_tags_inside_usage_removed(self):
        text = '<section class="usage">A <section class="inner">B'
        text += "</section>"
        assert sanitize(text) == "A B"

    def test_collapses_blank_lines(self):
        assert sanitize("a\n\n\n\n\nb") == "a\n\nb"

    def test_empty_string(self):
        assert sanitize("") == ""

    def test_deterministic(self):
        text = LICENSE + '<section class="usage">\n```\ncode\n```\nx</section>'
        assert sanitize(text) == sanitize(text)


# ── extract_usage ────────────────────────────────────────────────────────────


class TestExtractUsage:
    def test_interior_only(self):
        assert extract_usage('pre<section class="usage">mid</section>post') == "mid"

    def test_no_section(self):
        assert extract_usage("nothing here") == "nothing here"

    def test_unclosed_section_passes_through(self):
        text = '<section class="usage">never closed'
        assert extract_usage(text) == text


# ── strip_markup / collapse_newlines ─────────────────────────────────────────


class TestStripMarkup:
    def test_comments_and_tags(self):
        text = '<!-- c --><section class="x">body</section>\n\n\n\nend'
        assert strip_markup(text) == "body\n\nend"


class TestCollapseNewlines:
    def test_three_or_more(self):
        assert collapse_newlines("a\n\n\nb\n\n\n\n\nc") == "a\n\nb\n\nc"

    def test_two_untouched(self):
        assert collapse_newlines("a\n\nb") == "a\n\nb"

    def test_idempotent(self):
        for text in ["", "a\n\n\n\nb", "\n\n\n", "x\ny\n\n\n\n\n\nz\n\n\n"]:
            once = collapse_newlines(text)
            assert collapse_newlines(once) == once


# ── densify ──────────────────────────────────────────────────────────────────


class TestDensify:
    def test_single_line(self):
        assert densify("\n\na\nb  c\t\td\n") == "a b c\td"

    def test_history_block(self):
        assert densify("alice: hi\nbob: there\n") == "alice: hi bob: there"

    def test_crlf(self):
        assert densify("alice: Line one\r\nLine two\r\n") == "alice: Line one Line two"

    def test_empty(self):
        assert densify("") == ""
        assert densify("\n\n") == ""

    def test_idempotent(self):
        for text in ["a\n\nb", "  x  \t\t y\n", "\n\nq\n"]:
            once = densify(text)
            assert densify(once) == once

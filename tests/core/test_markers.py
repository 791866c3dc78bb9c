"""Tests for translation marker detection and injection."""

from abouttranslator.core.constants import DEFAULT_MARKER
from abouttranslator.core.markers import (
    add_marker,
    is_translated,
    marker_comment,
    matched_markers,
    strip_markers,
)

DECL = '<?xml version="1.0" encoding="utf-8"?>'


class TestMarkerComment:
    def test_full_comment_unchanged(self):
        assert marker_comment("<!-- Done -->") == "<!-- Done -->"

    def test_bare_text_wrapped(self):
        assert marker_comment("Translated by Bob") == "<!-- Translated by Bob -->"

    def test_empty_gives_default(self):
        assert marker_comment("") == DEFAULT_MARKER
        assert marker_comment(None) == DEFAULT_MARKER
        assert marker_comment("   ") == DEFAULT_MARKER


class TestIsTranslated:
    def test_plain_document(self):
        assert not is_translated(f"{DECL}\n<a><description>x</description></a>")

    def test_default_marker(self):
        assert is_translated(f"{DECL}\n<!-- AI-Translated -->\n<a/>")

    def test_legacy_ai_translated_variant(self):
        assert is_translated("<!-- AI-Translated by v1.2 --><a/>")

    def test_legacy_translated_variant(self):
        assert is_translated("<a/>\n<!-- Translated 2023-01-01 -->")

    def test_custom_marker(self):
        text = f"{DECL}\n<!-- Done by Bob -->\n<a/>"
        assert is_translated(text, "<!-- Done by Bob -->")
        assert not is_translated(text, DEFAULT_MARKER)

    def test_case_sensitive(self):
        assert not is_translated("<!-- ai-translated --><a/>")

    def test_matched_labels(self):
        text = "<!-- AI-Translated -->\n<!-- Translated -->\n<a/>"
        assert matched_markers(text) == ["configured", "ai-translated", "translated"]

    def test_no_labels(self):
        assert matched_markers("<a/>") == []


class TestAddMarker:
    def test_inserted_after_declaration(self):
        text = f"{DECL}\n<a/>\n"
        assert add_marker(text) == f"{DECL}\n<!-- AI-Translated -->\n<a/>\n"

    def test_declaration_without_newline(self):
        text = f"{DECL}<a/>"
        assert add_marker(text) == f"{DECL}\n<!-- AI-Translated -->\n<a/>"

    def test_crlf_preserved(self):
        text = f"{DECL}\r\n<a/>\r\n"
        assert add_marker(text) == f"{DECL}\r\n<!-- AI-Translated -->\r\n<a/>\r\n"

    def test_no_declaration_prepends(self):
        assert add_marker("<a/>") == "<!-- AI-Translated -->\n<a/>"

    def test_idempotent(self):
        text = f"{DECL}\n<a><description>x</description></a>\n"
        once = add_marker(text)
        twice = add_marker(once)
        assert once == twice
        assert twice.count("<!-- AI-Translated -->") == 1

    def test_replaces_legacy_markers(self):
        text = f"{DECL}\n<!-- Translated long ago -->\n<a/>\n"
        result = add_marker(text)
        assert "Translated long ago" not in result
        assert result == f"{DECL}\n<!-- AI-Translated -->\n<a/>\n"

    def test_detected_after_adding(self):
        for marker in (DEFAULT_MARKER, "<!-- Done by Bob -->", "Machine translation"):
            assert is_translated(add_marker(f"{DECL}\n<a/>", marker), marker)

    def test_custom_marker_idempotent(self):
        once = add_marker(f"{DECL}\n<a/>", "<!-- Done by Bob -->")
        assert add_marker(once, "<!-- Done by Bob -->").count("Done by Bob") == 1


class TestStripMarkers:
    def test_removes_all_variants(self):
        text = "<!-- AI-Translated -->\n<!-- Translated x -->\n<a/>"
        assert strip_markers(text) == "<a/>"

    def test_keeps_other_comments(self):
        text = "<!-- Author notes -->\n<a/>"
        assert strip_markers(text) == text

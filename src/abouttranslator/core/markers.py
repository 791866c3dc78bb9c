"""Translation markers: detect and inject the "already translated" comment."""

from __future__ import annotations

import re

from abouttranslator.core.constants import (
    AI_TRANSLATED_PREFIX,
    DEFAULT_MARKER,
    LEGACY_MARKER_PATTERNS,
    TRANSLATED_PREFIX,
    XML_DECLARATION_RE,
)


def marker_comment(marker: str | None) -> str:
    """Normalize a configured marker into a full XML comment.

    ``"<!-- AI-Translated -->"`` is returned unchanged, a bare text such as
    ``"Translated by Bob"`` becomes ``"<!-- Translated by Bob -->"``.
    """
    text = (marker or "").strip()
    if not text:
        return DEFAULT_MARKER
    if text.startswith("<!--") and text.endswith("-->"):
        return text
    return f"<!-- {text} -->"


def matched_markers(text: str, marker: str | None = DEFAULT_MARKER) -> list[str]:
    """Return which marker variants occur in *text*.

    Labels: ``"configured"`` (exact configured marker), ``"ai-translated"``
    and ``"translated"`` (legacy prefixes). Matching is case sensitive.
    """
    found: list[str] = []
    if marker_comment(marker) in text:
        found.append("configured")
    if AI_TRANSLATED_PREFIX in text:
        found.append("ai-translated")
    if TRANSLATED_PREFIX in text:
        found.append("translated")
    return found


def is_translated(text: str, marker: str | None = DEFAULT_MARKER) -> bool:
    """True if *text* carries the configured marker or a legacy one."""
    return bool(matched_markers(text, marker))


def strip_markers(text: str, marker: str | None = DEFAULT_MARKER) -> str:
    """Remove every marker comment (legacy patterns and the configured literal)."""
    for pattern in LEGACY_MARKER_PATTERNS:
        text = pattern.sub("", text)
    exact = re.compile(re.escape(marker_comment(marker)) + r"[ \t]*(?:\r?\n)?")
    return exact.sub("", text)


def add_marker(text: str, marker: str | None = DEFAULT_MARKER) -> str:
    """Insert a single marker comment right after the XML declaration.

    Existing markers are removed first, so applying this twice still leaves
    exactly one marker. Without a declaration the marker goes on the first line.
    """
    comment = marker_comment(marker)
    text = strip_markers(text, comment)

    decl = XML_DECLARATION_RE.match(text)
    if decl is None:
        return f"{comment}\n{text}"

    pos = decl.end()
    if text[pos:pos + 1] == "\n":
        block = f"\n{comment}"
    elif text[pos:pos + 2] == "\r\n":
        block = f"\r\n{comment}"
    else:
        block = f"\n{comment}\n"
    return text[:pos] + block + text[pos:]

"""Structured writer: lxml element tree → about.xml text."""

from __future__ import annotations

from lxml import etree

from abouttranslator.core.constants import DEFAULT_XML_DECLARATION


def serialize_document(
    tree: etree._ElementTree,
    declaration: str | None = None,
) -> str:
    """Serialize *tree* back to text.

    The original *declaration* is written verbatim on the first line (a UTF-8
    declaration is used when the source had none). Elements without existing
    whitespace get two-space indentation; existing whitespace is kept as is.
    Line endings are always LF.
    """
    body = etree.tostring(tree, encoding="unicode", pretty_print=True)
    body = body.replace("\r\n", "\n")
    return f"{declaration or DEFAULT_XML_DECLARATION}\n{body}"

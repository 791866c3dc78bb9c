"""Structured reader: about.xml text → lxml element tree."""

from __future__ import annotations

from lxml import etree

from abouttranslator.core.constants import DESCRIPTION_TAG, XML_DECLARATION_RE

# Failures of the structured path that hand over to the regex fallback.
# XMLSyntaxError and SerialisationError both derive from LxmlError; lxml
# raises ValueError for text that cannot be represented in XML.
STRUCTURE_ERRORS = (etree.LxmlError, ValueError)


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_blank_text=False,
        remove_comments=False,
        strip_cdata=False,
        resolve_entities=False,
        no_network=True,
    )


def split_declaration(text: str) -> tuple[str | None, str]:
    """Split *text* into (XML declaration, rest of document).

    The declaration is returned without BOM or surrounding whitespace, or
    None if the document does not start with one.
    """
    match = XML_DECLARATION_RE.match(text)
    if match is None:
        return None, text.lstrip("\ufeff")
    declaration = match.group(0).lstrip("\ufeff").strip()
    return declaration, text[match.end():]


def parse_document(text: str) -> etree._ElementTree:
    """Parse about.xml text into an element tree.

    Whitespace, comments and CDATA sections are preserved. The declaration
    is parsed separately so that its ``encoding`` attribute never conflicts
    with the already-decoded text.

    Raises:
        lxml.etree.XMLSyntaxError: If the text is not well-formed XML.
    """
    _, body = split_declaration(text)
    root = etree.fromstring(body, parser=_make_parser())
    return root.getroottree()


def find_description(tree: etree._ElementTree) -> etree._Element | None:
    """Return the first ``description`` element in document order, or None."""
    return next(tree.iter(DESCRIPTION_TAG), None)


def element_text(element: etree._Element) -> str:
    """Concatenated text of *element* and all its descendants (comments excluded)."""
    return str(element.xpath("string()"))

"""Write translated text back into the description element."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from abouttranslator.core.constants import DESCRIPTION_FALLBACK_RE
from abouttranslator.core.parser import (
    STRUCTURE_ERRORS,
    find_description,
    parse_document,
    split_declaration,
)
from abouttranslator.core.writer import serialize_document
from abouttranslator.translation.extractor import Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Replacement:
    """Full document text after replacement plus the strategy used."""

    text: str
    strategy: Strategy


def has_description_tags(text: str) -> bool:
    """Check that a replacement result still contains a description tag."""
    return "<description>" in text or "</description>" in text


def replace_fallback(text: str, new_text: str) -> str:
    """Regex replacement of the first description's inner content.

    The opening tag (including attributes) and closing tag are kept exactly;
    *new_text* is inserted verbatim.
    """
    match = DESCRIPTION_FALLBACK_RE.search(text)
    if match is None:
        return text
    return text[:match.start(2)] + new_text + text[match.end(2):]


def _replace_structured(text: str, new_text: str) -> str:
    declaration, _ = split_declaration(text)
    tree = parse_document(text)

    element = find_description(tree)
    if element is None:
        return text

    # Text replacement is total: child markup is discarded
    for child in list(element):
        element.remove(child)
    element.text = new_text

    return serialize_document(tree, declaration)


def replace(text: str, new_text: str) -> Replacement:
    """Replace the first description's content, structured parse first.

    Parse or serialization failures fall back to the regex path. Callers
    should still check the result with :func:`has_description_tags`, since
    the structured path can lose the tags without raising.
    """
    try:
        return Replacement(_replace_structured(text, new_text), Strategy.STRUCTURED)
    except STRUCTURE_ERRORS as e:
        logger.warning("XML processing failed, using regex fallback: %s", e)
        return Replacement(replace_fallback(text, new_text), Strategy.FALLBACK)


def replace_description(text: str, new_text: str) -> str:
    """Return *text* with the first description's content set to *new_text*."""
    return replace(text, new_text).text

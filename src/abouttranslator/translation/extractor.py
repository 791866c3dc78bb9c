"""Extract the translatable description from an about.xml document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from abouttranslator.core.constants import DESCRIPTION_FALLBACK_RE
from abouttranslator.core.parser import (
    STRUCTURE_ERRORS,
    element_text,
    find_description,
    parse_document,
)

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """Which path produced an extraction or replacement."""
    STRUCTURED = "structured"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Extraction:
    """Trimmed description text plus the strategy that found it.

    An empty ``text`` means no description was found (or it was empty).
    """

    text: str
    strategy: Strategy

    @property
    def found(self) -> bool:
        return bool(self.text)


def extract_fallback(text: str) -> str:
    """Regex extraction for documents that are not well-formed XML."""
    match = DESCRIPTION_FALLBACK_RE.search(text)
    return match.group(2).strip() if match else ""


def extract(text: str) -> Extraction:
    """Extract the first description, structured parse first.

    Only parse failures switch to the regex path; a well-formed document
    without a description element yields an empty structured result.
    """
    try:
        tree = parse_document(text)
    except STRUCTURE_ERRORS as e:
        logger.debug("XML parsing failed, using regex fallback: %s", e)
        return Extraction(extract_fallback(text), Strategy.FALLBACK)

    element = find_description(tree)
    if element is None:
        return Extraction("", Strategy.STRUCTURED)
    return Extraction(element_text(element).strip(), Strategy.STRUCTURED)


def extract_description(text: str) -> str:
    """Return the trimmed text of the first description, or "" if there is none."""
    return extract(text).text

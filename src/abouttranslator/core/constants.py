"""Constants for about.xml metadata files and translation markers."""

import re

# Only files with exactly this name are picked up by the batch driver
ABOUT_FILENAME = "about.xml"

BACKUP_SUFFIX = ".bak"

DEFAULT_ENCODING = "utf-8"

# Marker written after translation. Stored as a full XML comment.
DEFAULT_MARKER = "<!-- AI-Translated -->"

# Legacy marker prefixes: any of these means "already translated"
AI_TRANSLATED_PREFIX = "<!-- AI-Translated"
TRANSLATED_PREFIX = "<!-- Translated"

# Stripped before a fresh marker is written (one trailing line break included)
LEGACY_MARKER_PATTERNS = (
    re.compile(r"<!--\s*AI-Translated[^>]*-->[ \t]*(?:\r?\n)?"),
    re.compile(r"<!--\s*Translated[^>]*-->[ \t]*(?:\r?\n)?"),
)

# <?xml ... ?> at the very start of a document (optional BOM / leading whitespace)
XML_DECLARATION_RE = re.compile(r"^\ufeff?\s*<\?xml\s.*?\?>", re.DOTALL)

DEFAULT_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

# Name of the element whose text gets translated
DESCRIPTION_TAG = "description"

# Regex used when the document is not well-formed XML.
# Group 1: attributes of the opening tag (with leading whitespace), group 2: content.
DESCRIPTION_FALLBACK_RE = re.compile(
    r"<description(\s[^>]*)?>([\s\S]*?)</description>",
    re.IGNORECASE,
)

# Pause between API calls in a batch (seconds)
DEFAULT_REQUEST_DELAY = 0.5

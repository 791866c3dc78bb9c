"""abouttranslator: Translate the description of about.xml mod metadata files."""

__version__ = "0.3.0"

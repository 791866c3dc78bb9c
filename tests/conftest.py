"""Shared test fixtures for abouttranslator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from abouttranslator.backends.base import TranslationBackend
from abouttranslator.config import AppConfig

SIMPLE_ABOUT = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<ModMetaData>\n"
    "  <name>Hello Mod</name>\n"
    "  <description>Hello World</description>\n"
    "</ModMetaData>\n"
)

TRANSLATED_ABOUT = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<!-- AI-Translated -->\n"
    "<ModMetaData>\n"
    "  <description>你好世界</description>\n"
    "</ModMetaData>\n"
)

NO_DESCRIPTION_ABOUT = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<ModMetaData>\n"
    "  <name>Nameless</name>\n"
    "</ModMetaData>\n"
)

# Unescaped ampersand: not well-formed, only the regex path can handle it
MALFORMED_ABOUT = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<ModMetaData>\n"
    "  <name>Guns & Roses</name>\n"
    "  <description>Adds guns & roses</description>\n"
    "</ModMetaData>\n"
)


def write_about(directory: Path, content: str, name: str = "about.xml") -> Path:
    """Write an about.xml (creating parent folders) and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8", newline="")
    return path


class RecordingBackend(TranslationBackend):
    """Backend returning fixed translations and remembering what it was asked."""

    def __init__(self, reply: str = "你好世界") -> None:
        self.reply = reply
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def translate_batch(self, texts: list[str], target_lang: str) -> list[str]:
        for text in texts:
            self.calls.append((text, target_lang))
        return [self.reply for _ in texts]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(api_key="test-key", request_delay=0.0)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def mods_tree(tmp_path: Path) -> Path:
    """Three mods: one untranslated, one already marked, one without description."""
    root = tmp_path / "Mods"
    write_about(root / "ModA" / "About", SIMPLE_ABOUT)
    write_about(root / "ModB" / "About", TRANSLATED_ABOUT)
    write_about(root / "ModC" / "About", NO_DESCRIPTION_ABOUT)
    (root / "ModA" / "About" / "Preview.png").write_bytes(b"\x89PNG")
    return root

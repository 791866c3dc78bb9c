"""Dummy translation backend for tests and dry runs: prefixes text with a [LANG] tag."""

from __future__ import annotations

from abouttranslator.backends.base import TranslationBackend


class DummyBackend(TranslationBackend):
    """Offline backend that prefixes each text with the target language tag.

    Example: "A small mod" → "[ZH-CN] A small mod"
    """

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
    ) -> list[str]:
        tag = f"[{target_lang.upper()}]"
        return [f"{tag} {text}" for text in texts]

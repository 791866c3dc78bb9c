"""Abstract base class for translation backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class TranslationBackend(ABC):
    """Interface for translation backends.

    Backends report failure by returning an empty string for the affected
    text; they never raise out of ``translate``/``translate_batch``.
    """

    @abstractmethod
    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
    ) -> list[str]:
        """Translate a batch of texts one by one.

        Args:
            texts: List of strings to translate.
            target_lang: Target language code (e.g. "zh-CN").

        Returns:
            List of translated strings, same length as input. Failed
            entries are empty strings.
        """
        ...

    def translate(self, text: str, target_lang: str) -> str:
        """Translate a single text. Default implementation uses translate_batch."""
        results = self.translate_batch([text], target_lang)
        return results[0]

    def close(self) -> None:
        """Release network resources. No-op by default."""

    def __enter__(self) -> TranslationBackend:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

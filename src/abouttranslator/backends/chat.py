"""Chat-completions translation backend (OpenAI-compatible HTTP API)."""

from __future__ import annotations

import logging
from typing import Any

import requests

from abouttranslator.backends.base import TranslationBackend
from abouttranslator.backends.prompts import get_system_prompt
from abouttranslator.config import (
    DEFAULT_API_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
)

logger = logging.getLogger(__name__)


class ChatBackend(TranslationBackend):
    """Translate through a ``/chat/completions`` endpoint.

    One request per text, no retries. Any failure (missing key, non-2xx
    status, malformed body, transport error) is logged and yields "".
    ``timeout`` defaults to None, so a stalled server blocks the caller.
    """

    def __init__(
        self,
        api_key: str | None,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        *,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self._api_key = api_key or ""
        self._session = session if session is not None else requests.Session()
        if self._api_key:
            self._session.headers["Authorization"] = f"Bearer {self._api_key}"

    def build_payload(self, text: str, target_lang: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": get_system_prompt(target_lang)},
                {"role": "user", "content": text},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "stream": False,
        }

    def translate_batch(
        self,
        texts: list[str],
        target_lang: str,
    ) -> list[str]:
        return [self._translate_one(text, target_lang) for text in texts]

    def _translate_one(self, text: str, target_lang: str) -> str:
        if not self._api_key:
            logger.error("API key is not set, please set it in configuration.")
            return ""

        logger.info("Calling translation API (target language: %s)...", target_lang)
        try:
            response = self._session.post(
                self.api_url,
                json=self.build_payload(text, target_lang),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Error during translation: %s", e)
            return ""

        if not 200 <= response.status_code < 300:
            logger.error("API call failed: %s", response.status_code)
            logger.error("Error details: %s", response.text)
            return ""

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected API response format: %r", e)
            return ""

        if not isinstance(content, str):
            logger.error("Unexpected API response format: content is %s", type(content).__name__)
            return ""

        logger.info("Translation successful!")
        return content.strip()

    def close(self) -> None:
        self._session.close()

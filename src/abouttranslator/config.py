"""Persistent settings: API endpoint, model, target language and marker."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from abouttranslator.core.constants import DEFAULT_MARKER, DEFAULT_REQUEST_DELAY

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".abouttranslator"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"

DEFAULT_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEFAULT_MODEL = "deepseek-ai/DeepSeek-R1-0528-Qwen3-8B"
DEFAULT_MAX_TOKENS = 4000
DEFAULT_TEMPERATURE = 0.3

# Models offered by the interactive menu: (label, model id)
MODEL_PRESETS: list[tuple[str, str]] = [
    ("DeepSeek-R1", DEFAULT_MODEL),
    ("Qwen3-8B", "Qwen/Qwen3-8B"),
]

API_KEY_ENVVAR = "ABOUTTRANSLATOR_API_KEY"


@dataclass
class AppConfig:
    """User settings, read once per batch and never mutated by the pipeline."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    api_url: str = DEFAULT_API_URL
    target_language: str = "zh-CN"
    translation_marker: str = DEFAULT_MARKER
    ui_language: str = "en"
    last_selected_path: str = ""
    request_delay: float = DEFAULT_REQUEST_DELAY
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    request_timeout: float | None = None

    @classmethod
    def from_dict(cls, data: dict) -> AppConfig:
        """Build a config from a JSON mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    def set_value(self, key: str, raw: str) -> None:
        """Set field *key* from a string, converting to the field's type.

        Raises:
            KeyError: Unknown setting name.
            ValueError: *raw* cannot be converted.
        """
        defaults = AppConfig()
        if key not in {f.name for f in fields(self)}:
            raise KeyError(key)
        current = getattr(defaults, key)
        value: object
        if key == "request_timeout":
            value = None if raw.strip().lower() in ("", "none", "null") else float(raw)
        elif isinstance(current, int):
            value = int(raw)
        elif isinstance(current, float):
            value = float(raw)
        else:
            value = raw
        setattr(self, key, value)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load settings from *path* (default ``~/.abouttranslator/config.json``).

    A missing file gives the defaults. An unreadable or malformed file is
    reported as a warning and also gives the defaults.
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        return AppConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value is not an object")
        return AppConfig.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Could not read config %s, using defaults: %s", path, e)
        return AppConfig()


def save_config(config: AppConfig, path: str | Path | None = None) -> Path:
    """Write *config* as indented UTF-8 JSON. Returns the path written."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path

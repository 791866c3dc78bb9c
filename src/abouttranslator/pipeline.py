"""Per-file translation pipeline and the sequential batch driver.

Used by the CLI (cli.py). Each about.xml goes through:
lock check → marker check → backup → extract → translate → replace →
verify → mark → write. Every file ends as SUCCEEDED, SKIPPED or FAILED;
a failing file never aborts the batch.
"""

from __future__ import annotations

import logging
import os
import shutil
import time as _time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from abouttranslator.backends.base import TranslationBackend
from abouttranslator.config import AppConfig
from abouttranslator.core.constants import (
    ABOUT_FILENAME,
    BACKUP_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_REQUEST_DELAY,
)
from abouttranslator.core.markers import add_marker, marker_comment, matched_markers
from abouttranslator.translation.extractor import Strategy, extract
from abouttranslator.translation.patcher import (
    has_description_tags,
    replace,
    replace_fallback,
)

logger = logging.getLogger(__name__)

_PREVIEW_LENGTH = 100


class Outcome(str, Enum):
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


class Reason(str, Enum):
    """Why a file ended in its outcome."""
    TRANSLATED = "translated"
    ALREADY_TRANSLATED = "already_translated"
    NO_DESCRIPTION = "no_description"
    LOCKED = "locked"
    BACKUP = "backup"
    TRANSLATION = "translation"
    WRITE = "write"
    ERROR = "error"


# ── Per-file errors ──


class FileProcessingError(Exception):
    """Base for errors that end one file's pass."""
    outcome = Outcome.FAILED
    reason = Reason.ERROR


class LockedFileError(FileProcessingError):
    reason = Reason.LOCKED


class BackupError(FileProcessingError):
    reason = Reason.BACKUP


class NoDescriptionError(FileProcessingError):
    """Nothing to translate. Counted as skipped, not failed."""
    outcome = Outcome.SKIPPED
    reason = Reason.NO_DESCRIPTION


class TranslationError(FileProcessingError):
    reason = Reason.TRANSLATION


class WriteError(FileProcessingError):
    reason = Reason.WRITE


# ── Results ──


@dataclass
class FileResult:
    """Outcome of one pipeline pass over one file."""
    path: Path
    outcome: Outcome
    reason: Reason
    message: str = ""
    translator_called: bool = False
    extraction: Strategy | None = None
    replacement: Strategy | None = None


@dataclass
class BatchResult:
    """Totals of a batch run."""
    total: int = 0
    succeeded: int = 0
    skipped: int = 0
    failed: int = 0
    elapsed_seconds: float = 0.0
    results: list[FileResult] = field(default_factory=list)

    def add(self, result: FileResult) -> None:
        self.results.append(result)
        if result.outcome == Outcome.SUCCEEDED:
            self.succeeded += 1
        elif result.outcome == Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def errors(self) -> list[tuple[str, str]]:
        """(path, message) for every failed file."""
        return [
            (str(r.path), r.message)
            for r in self.results
            if r.outcome == Outcome.FAILED
        ]

    def counts(self) -> dict[str, int]:
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "skipped": self.skipped,
            "failed": self.failed,
        }


# (index, total, result) after each file
ProgressCallback = Callable[[int, int, FileResult], None]


# ── File helpers ──


def is_file_locked(path: Path) -> bool:
    """Probe whether *path* can be opened exclusively for read-write.

    Advisory only: nothing is held after the probe, so another process may
    still grab the file before it is written.
    """
    try:
        with open(path, "r+b") as f:
            if os.name == "posix":
                import fcntl

                try:
                    fcntl.flock(f.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                except OSError:
                    return True
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except FileNotFoundError:
        raise
    except OSError:
        return True
    return False


def read_document(path: Path) -> str:
    """Read an about.xml as UTF-8 (a leading BOM is dropped), line endings untouched."""
    with open(path, encoding="utf-8-sig", newline="") as f:
        return f.read()


def write_document(path: Path, text: str) -> None:
    """Overwrite *path* with *text* as UTF-8 without BOM."""
    with open(path, "w", encoding=DEFAULT_ENCODING, newline="") as f:
        f.write(text)


def backup_path_for(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def backup_file(path: Path) -> Path:
    """Copy *path* byte for byte to ``<path>.bak``, replacing any older backup."""
    target = backup_path_for(path)
    try:
        shutil.copyfile(path, target)
    except OSError as e:
        raise BackupError(f"Backup failed: {e}") from e
    return target


def find_about_files(root: str | Path) -> list[Path]:
    """Every file named about.xml below *root*, recursively.

    The name comparison ignores case, so RimWorld's ``About/About.xml`` matches.
    """
    root = Path(root)
    return sorted(
        p for p in root.rglob("*")
        if p.name.lower() == ABOUT_FILENAME and p.is_file()
    )


def _preview(text: str, length: int = _PREVIEW_LENGTH) -> str:
    return text if len(text) <= length else f"{text[:length]}..."


# ── Backend creation ──


def create_backend(
    backend_name: str,
    config: AppConfig,
) -> tuple[TranslationBackend, str]:
    """Create a translation backend instance.

    Returns:
        Tuple of (backend_instance, backend_label_for_report).

    Raises:
        ValueError: Unknown backend, or the chat backend without an API key.
    """
    from abouttranslator.backends.dummy import DummyBackend

    if backend_name == "dummy":
        return DummyBackend(), "dummy"
    if backend_name == "chat":
        if not config.has_api_key:
            raise ValueError(
                "API key required. Use --api-key, set ABOUTTRANSLATOR_API_KEY"
                " or run 'abouttranslator config set api_key <KEY>'."
            )
        from abouttranslator.backends.chat import ChatBackend

        backend = ChatBackend(
            config.api_key,
            config.api_url,
            config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            timeout=config.request_timeout,
        )
        return backend, f"chat:{config.model}"
    raise ValueError(f"Unknown backend: {backend_name!r} (expected 'chat' or 'dummy')")


# ── Pipeline ──


@dataclass
class _Pass:
    """Mutable state of one pass, kept for the result even when a step raises."""
    translator_called: bool = False
    extraction: Strategy | None = None
    replacement: Strategy | None = None


class FilePipeline:
    """Translate the description of a single about.xml file.

    The backend, config and logger are injected; the config is only read.
    ``process`` never raises: every error becomes a FAILED result.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        config: AppConfig,
        log: logging.Logger | None = None,
    ) -> None:
        self.backend = backend
        self.config = config
        self.log = log if log is not None else logger
        self.marker = marker_comment(config.translation_marker)

    def process(self, path: str | Path) -> FileResult:
        path = Path(path)
        state = _Pass()
        try:
            result = self._run(path, state)
        except FileProcessingError as e:
            if e.outcome == Outcome.SKIPPED:
                self.log.info("%s", e)
            else:
                self.log.error("%s: %s", path, e)
            result = FileResult(path, e.outcome, e.reason, str(e))
        except Exception as e:
            self.log.error("Error processing file %s: %s", path, e)
            result = FileResult(path, Outcome.FAILED, Reason.ERROR, str(e) or type(e).__name__)
        result.translator_called = state.translator_called
        result.extraction = state.extraction
        result.replacement = state.replacement
        return result

    def _run(self, path: Path, state: _Pass) -> FileResult:
        if is_file_locked(path):
            raise LockedFileError("File is locked, cannot process.")

        text = read_document(path)

        found = matched_markers(text, self.marker)
        if found:
            self.log.info("Skipped translated file: %s (%s)", path, ", ".join(found))
            return FileResult(
                path, Outcome.SKIPPED, Reason.ALREADY_TRANSLATED,
                "Already translated",
            )

        backup = backup_file(path)
        self.log.info("Backup created: %s", backup)

        extraction = extract(text)
        state.extraction = extraction.strategy
        if not extraction.found:
            raise NoDescriptionError("No description content found, skipping file")

        self.log.info(
            "Extracted description content, length: %d characters", len(extraction.text),
        )
        self.log.debug("Original preview: %s", _preview(extraction.text))

        state.translator_called = True
        translated = self.backend.translate(extraction.text, self.config.target_language)
        if not translated or not translated.strip():
            raise TranslationError("Translation failed, skipping file")

        replacement = replace(text, translated)
        state.replacement = replacement.strategy
        new_text = replacement.text
        if not has_description_tags(new_text):
            self.log.warning(
                "No description tags found after replacement, using fallback method",
            )
            new_text = replace_fallback(text, translated)
            state.replacement = Strategy.FALLBACK

        new_text = add_marker(new_text, self.marker)

        try:
            write_document(path, new_text)
        except OSError as e:
            raise WriteError(f"Write failed: {e}") from e

        self.log.info("File updated successfully, translation marker added")
        return FileResult(path, Outcome.SUCCEEDED, Reason.TRANSLATED, "Translated")


# ── Batch ──


class BatchDriver:
    """Run a FilePipeline over every about.xml below a root directory.

    Files are processed one at a time. After each file whose pass reached
    the translator, the driver sleeps ``delay`` seconds (if more files
    follow) to keep the API request rate down.
    """

    def __init__(
        self,
        pipeline: FilePipeline,
        *,
        delay: float = DEFAULT_REQUEST_DELAY,
        sleep: Callable[[float], None] = _time.sleep,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.delay = delay
        self._sleep = sleep
        self._on_progress = on_progress

    def run(self, root: str | Path) -> BatchResult:
        """Process every about.xml under *root*.

        Raises:
            NotADirectoryError: If *root* is not a directory.
        """
        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")

        t0 = _time.monotonic()
        files = find_about_files(root)
        result = BatchResult(total=len(files))
        logger.info("Found %d about.xml files", len(files))

        for index, path in enumerate(files, start=1):
            logger.info("[%d/%d] Processing file: %s", index, len(files), path)
            file_result = self.pipeline.process(path)
            result.add(file_result)

            if self._on_progress:
                self._on_progress(index, len(files), file_result)

            if file_result.translator_called and self.delay > 0 and index < len(files):
                self._sleep(self.delay)

        result.elapsed_seconds = _time.monotonic() - t0
        logger.info(
            "Total: %d, Success: %d, Skipped: %d, Failed: %d",
            result.total, result.succeeded, result.skipped, result.failed,
        )
        return result


def batch_translate(
    root: str | Path,
    *,
    backend: TranslationBackend,
    config: AppConfig,
    delay: float | None = None,
    on_progress: ProgressCallback | None = None,
) -> BatchResult:
    """Translate every about.xml under *root* with the given backend and settings."""
    pipeline = FilePipeline(backend, config)
    driver = BatchDriver(
        pipeline,
        delay=config.request_delay if delay is None else delay,
        on_progress=on_progress,
    )
    return driver.run(root)


# ── Scan (read-only) ──


@dataclass
class ScanEntry:
    """Read-only view of one about.xml for the scan command."""
    path: Path
    translated: bool
    markers: list[str]
    description: str
    strategy: Strategy | None
    error: str = ""


def scan_directory(root: str | Path, marker: str | None) -> list[ScanEntry]:
    """Inspect every about.xml under *root* without modifying anything."""
    entries: list[ScanEntry] = []
    for path in find_about_files(root):
        try:
            text = read_document(path)
        except (OSError, ValueError) as e:
            entries.append(ScanEntry(path, False, [], "", None, error=str(e)))
            continue
        found = matched_markers(text, marker)
        extraction = extract(text)
        entries.append(ScanEntry(
            path=path,
            translated=bool(found),
            markers=found,
            description=extraction.text,
            strategy=extraction.strategy,
        ))
    return entries

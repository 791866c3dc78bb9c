"""Batch translation report data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from abouttranslator.pipeline import BatchResult


@dataclass
class FileRow:
    path: str
    outcome: str
    reason: str
    message: str = ""


@dataclass
class BatchReport:
    """Collects statistics about a batch run."""

    root_path: str = ""
    target_lang: str = ""
    backend: str = ""
    marker: str = ""

    total_files: int = 0
    succeeded: int = 0
    skipped: int = 0
    failed: int = 0

    started_at: datetime = field(default_factory=datetime.now)
    finished_at: datetime | None = None

    files: list[FileRow] = field(default_factory=list)

    @property
    def duration_seconds(self) -> float:
        if self.finished_at is None:
            return 0.0
        return (self.finished_at - self.started_at).total_seconds()

    @property
    def errors(self) -> list[str]:
        return [f"{row.path}: {row.message}" for row in self.files if row.outcome == "failed"]

    def finish(self) -> None:
        self.finished_at = datetime.now()

    def record(self, result: BatchResult) -> None:
        """Copy totals and per-file rows from a finished batch."""
        self.total_files = result.total
        self.succeeded = result.succeeded
        self.skipped = result.skipped
        self.failed = result.failed
        self.files = [
            FileRow(
                path=str(r.path),
                outcome=r.outcome.value,
                reason=r.reason.value,
                message=r.message,
            )
            for r in result.results
        ]

    def to_dict(self) -> dict:
        return {
            "root_path": self.root_path,
            "target_lang": self.target_lang,
            "backend": self.backend,
            "marker": self.marker,
            "total_files": self.total_files,
            "succeeded": self.succeeded,
            "skipped": self.skipped,
            "failed": self.failed,
            "duration_seconds": self.duration_seconds,
            "files": [
                {
                    "path": row.path,
                    "outcome": row.outcome,
                    "reason": row.reason,
                    "message": row.message,
                }
                for row in self.files
            ],
        }

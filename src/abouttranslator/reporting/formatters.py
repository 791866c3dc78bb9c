"""Output formatters for batch reports."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path

from abouttranslator.reporting.report import BatchReport


def to_json(report: BatchReport, indent: int = 2) -> str:
    """Format report as JSON string."""
    return json.dumps(report.to_dict(), indent=indent, default=str, ensure_ascii=False)


def to_markdown(report: BatchReport) -> str:
    """Format report as Markdown."""
    lines = [
        "# Translation Report",
        "",
        "| Field | Value |",
        "|-------|-------|",
        f"| Root | `{report.root_path}` |",
        f"| Target language | {report.target_lang} |",
        f"| Backend | {report.backend} |",
        f"| Marker | `{report.marker}` |",
        "",
        "## Statistics",
        "",
        "| Metric | Count |",
        "|--------|-------|",
        f"| Files found | {report.total_files} |",
        f"| Succeeded | {report.succeeded} |",
        f"| Skipped | {report.skipped} |",
        f"| Failed | {report.failed} |",
        f"| Duration | {report.duration_seconds:.1f}s |",
    ]

    if report.files:
        lines.extend([
            "",
            "## Files",
            "",
            "| File | Outcome | Reason |",
            "|------|---------|--------|",
        ])
        for row in report.files:
            lines.append(f"| `{row.path}` | {row.outcome} | {row.reason} |")

    if report.errors:
        lines.extend([
            "",
            "## Errors",
            "",
        ])
        for err in report.errors:
            lines.append(f"- {err}")

    return "\n".join(lines) + "\n"


def to_csv(report: BatchReport) -> str:
    """Format report as CSV, one row per file."""
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=["path", "outcome", "reason", "message"])
    writer.writeheader()
    for row in report.files:
        writer.writerow({
            "path": row.path,
            "outcome": row.outcome,
            "reason": row.reason,
            "message": row.message,
        })
    return output.getvalue()


def save_report(report: BatchReport, path: str | Path) -> None:
    """Save report to file, auto-detecting format from extension."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        content = to_json(report)
    elif suffix in (".md", ".markdown"):
        content = to_markdown(report)
    elif suffix == ".csv":
        content = to_csv(report)
    else:
        content = to_json(report)

    path.write_text(content, encoding="utf-8")

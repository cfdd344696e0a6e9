"""Fold per-file results into a ScanSummary and serialise it.

Functions:
    build_summary(results, files_scanned, skipped_dirs, unreadable) -> ScanSummary
    to_dict(summary, root)                                          -> dict
"""

from datetime import datetime, timezone
from functools import reduce
from typing import Iterable

from table_check.models import FileResult, ScanSummary


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build_summary(
    results: Iterable[FileResult],
    files_scanned: int | None = None,
    skipped_dirs: Iterable[str] = (),
    unreadable: Iterable[str] = (),
) -> ScanSummary:
    """Reduce *results* into totals.

    *files_scanned* defaults to the number of results; pass it explicitly when
    unreadable files should count as scanned.
    """
    results = list(results)
    summary = reduce(_add, results, ScanSummary())
    return ScanSummary(
        files_scanned=len(results) if files_scanned is None else files_scanned,
        errors=summary.errors,
        warnings=summary.warnings,
        files_with_issues=summary.files_with_issues,
        skipped_dirs=tuple(skipped_dirs),
        unreadable=tuple(unreadable),
    )


def to_dict(summary: ScanSummary, root: str) -> dict:
    return {
        "report_type":  "table_check",
        "root":         root,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "files_scanned":     summary.files_scanned,
            "files_with_issues": len(summary.files_with_issues),
            "errors":            summary.errors,
            "warnings":          summary.warnings,
            "total":             summary.total_issues,
            "skipped_dirs":      len(summary.skipped_dirs),
            "unreadable_files":  len(summary.unreadable),
        },
        "files": [
            {"path": r.path, "issues": [i.to_dict() for i in r.issues]}
            for r in summary.files_with_issues
        ],
        "skipped_dirs": list(summary.skipped_dirs),
        "unreadable":   list(summary.unreadable),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _add(acc: ScanSummary, result: FileResult) -> ScanSummary:
    if not result.issues:
        return acc
    return ScanSummary(
        errors=acc.errors + result.errors,
        warnings=acc.warnings + result.warnings,
        files_with_issues=acc.files_with_issues + (result,),
    )

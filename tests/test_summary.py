"""Tests for table_check/reports/summary.py and table_check/reports/console.py"""

from table_check.models import FileResult, Issue, Severity
from table_check.reports.console import format_issue, format_result, render_summary
from table_check.reports.summary import build_summary, to_dict


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _issue(severity=Severity.ERROR, line=3) -> Issue:
    return Issue(line=line, severity=severity, message="Broken", suggestion="Fix it")


def _results() -> list[FileResult]:
    return [
        FileResult("a.vue", (_issue(), _issue(Severity.WARNING, 7))),
        FileResult("b.vue"),
        FileResult("c.vue", (_issue(),)),
    ]


# ---------------------------------------------------------------------------
# build_summary()
# ---------------------------------------------------------------------------

def test_summary_counts():
    s = build_summary(_results())
    assert s.files_scanned == 3
    assert s.errors == 2
    assert s.warnings == 1
    assert s.total_issues == 3
    assert [r.path for r in s.files_with_issues] == ["a.vue", "c.vue"]


def test_summary_of_clean_files():
    s = build_summary([FileResult("a.vue"), FileResult("b.vue")])
    assert s.clean
    assert s.files_with_issues == ()


def test_summary_carries_skipped_and_unreadable():
    s = build_summary([], files_scanned=2, skipped_dirs=["/x"], unreadable=["bad.vue"])
    assert s.files_scanned == 2
    assert s.skipped_dirs == ("/x",)
    assert s.unreadable == ("bad.vue",)


def test_summary_is_deterministic():
    assert build_summary(_results()) == build_summary(_results())


# ---------------------------------------------------------------------------
# to_dict()
# ---------------------------------------------------------------------------

def test_to_dict_shape():
    d = to_dict(build_summary(_results()), "/workspace")
    assert d["root"] == "/workspace"
    assert d["summary"]["total"] == 3
    assert d["summary"]["files_with_issues"] == 2
    assert d["files"][0]["path"] == "a.vue"
    assert d["files"][0]["issues"][1] == {
        "line": 7, "severity": "warning", "message": "Broken", "suggestion": "Fix it",
    }
    assert "generated_at" in d


# ---------------------------------------------------------------------------
# console rendering
# ---------------------------------------------------------------------------

def test_format_issue_plain():
    text = format_issue(_issue(), color=False)
    assert text.startswith("[ERROR] Line 3: Broken")
    assert "Suggestion: Fix it" in text


def test_format_result_markers():
    assert format_result(FileResult("ok.vue"), color=False) == ["✓ ok.vue"]
    lines = format_result(FileResult("bad.vue", (_issue(Severity.WARNING),)), color=False)
    assert lines[0] == "✗ bad.vue"
    assert lines[1].startswith("  [WARNING] Line 3")


def test_render_summary_success_message():
    text = "\n".join(render_summary(build_summary([FileResult("a.vue")]), color=False))
    assert "No table column issues found" in text
    assert "Statistics" not in text


def test_render_summary_lists_offending_files():
    text = "\n".join(render_summary(build_summary(_results()), color=False))
    assert "Errors: 2" in text
    assert "Warnings: 1" in text
    assert "a.vue (2 issues)" in text
    assert "c.vue (1 issues)" in text
    assert "b.vue" not in text


def test_render_summary_reports_skipped_paths():
    s = build_summary([], skipped_dirs=["/locked"], unreadable=["x.vue"])
    text = "\n".join(render_summary(s, color=False))
    assert "Skipped 1 unreadable directories" in text
    assert "Skipped 1 unreadable files" in text

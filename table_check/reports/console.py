"""Console rendering of scan results.

Every function returns plain strings; ``color=False`` drops the ANSI styling
so the output can be compared in tests or piped to a file.
"""

import click

from table_check.models import FileResult, Issue, ScanSummary, Severity

RULE = "═" * 60

FIX_GUIDE = (
    "1. Custom content inside el-table-column must be wrapped in <template>",
    '2. Correct form: <template #default="scope">...content...</template>',
    "3. Make sure every <el-table-column> has a matching </el-table-column>",
    "4. Plain data can be shown with the prop attribute, no template needed",
)

_LABELS = {
    Severity.ERROR:   ("[ERROR]",   "red"),
    Severity.WARNING: ("[WARNING]", "yellow"),
}


def _style(text: str, fg: str, color: bool) -> str:
    return click.style(text, fg=fg) if color else text


def banner(root: str, color: bool = True) -> list[str]:
    return [
        _style("╔" + "═" * 58 + "╗", "blue", color),
        _style("║" + "Element Plus table column checker".center(58) + "║", "blue", color),
        _style("╚" + "═" * 58 + "╝", "blue", color),
        "",
        _style(f"Scanning directory: {root}", "cyan", color),
        "",
    ]


def format_issue(issue: Issue, color: bool = True) -> str:
    label, fg = _LABELS[issue.severity]
    return (
        f"{_style(label, fg, color)} Line {issue.line}: {issue.message}\n"
        f"         {_style(f'Suggestion: {issue.suggestion}', 'cyan', color)}"
    )


def format_result(result: FileResult, color: bool = True) -> list[str]:
    if not result.issues:
        return [f"{_style('✓', 'green', color)} {result.path}"]
    lines = [f"{_style('✗', 'red', color)} {result.path}"]
    lines.extend("  " + format_issue(i, color) for i in result.issues)
    lines.append("")
    return lines


def render_summary(summary: ScanSummary, color: bool = True) -> list[str]:
    lines = ["", RULE, _style("Report", "blue", color), RULE]

    if summary.clean:
        lines.append(_style("✨ No table column issues found!", "green", color))
    else:
        lines += [
            _style("📊 Statistics:", "yellow", color),
            f"   • Files scanned: {summary.files_scanned}",
            f"   • Files with issues: {len(summary.files_with_issues)}",
            f"   • Errors: {_style(str(summary.errors), 'red', color)}",
            f"   • Warnings: {_style(str(summary.warnings), 'yellow', color)}",
            f"   • Total issues: {summary.total_issues}",
            "",
            _style("💡 Quick fix guide:", "cyan", color),
            *FIX_GUIDE,
            "",
            _style("📝 Files to fix:", "yellow", color),
        ]
        lines += [
            f"   • {r.path} ({len(r.issues)} issues)"
            for r in summary.files_with_issues
        ]

    if summary.skipped_dirs:
        lines.append(_style(
            f"Skipped {len(summary.skipped_dirs)} unreadable directories", "yellow", color,
        ))
    if summary.unreadable:
        lines.append(_style(
            f"Skipped {len(summary.unreadable)} unreadable files", "yellow", color,
        ))

    lines += ["", RULE, _style("Check complete!", "green", color)]
    return lines

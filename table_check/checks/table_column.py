"""Rules for ``<el-table-column>`` usage.

Functions:
    check_content(content, rules)   -> list[Issue]
    check_file(path, rules)         -> FileResult

Rules applied per opening tag (self-closing tags are skipped):
    1. missing closing tag            error
    2. scope used without a wrapper   error
       other markup without wrapper   warning

Rules applied once per file:
    3. legacy ``slot-scope=`` attribute                      warning
    4. interactive component reading ``row`` with no wrapper  error
"""

import re
from pathlib import Path

from table_check.checks.template import (
    extract_template,
    line_number,
    opening_tag_pattern,
    scan_tags,
    strip_comments,
)
from table_check.models import FileResult, Issue, Rules, Severity, TagOccurrence

_ANY_TAG = re.compile(r"<[^>]+>")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def check_content(content: str, rules: Rules = Rules()) -> list[Issue]:
    """Return every issue found in the text of one component file."""
    region = extract_template(strip_comments(content))
    if not region:
        return []

    issues: list[Issue] = []
    for tag in scan_tags(region, content, rules):
        issues.extend(_check_tag(tag, rules))
    issues.extend(_check_legacy_slot(region, content, rules))
    issues.extend(_check_components(region, content, rules))
    return issues


def check_file(path: str | Path, rules: Rules = Rules()) -> FileResult:
    """Read *path* and check it.

    Bytes that are not valid UTF-8 are decoded as U+FFFD so the rest of the
    file is still checked.

    Raises:
        OSError: the file cannot be read
    """
    content = Path(path).read_text(encoding="utf-8", errors="replace")
    return FileResult(path=str(path), issues=tuple(check_content(content, rules)))


# ---------------------------------------------------------------------------
# Per-tag rules
# ---------------------------------------------------------------------------

def _check_tag(tag: TagOccurrence, rules: Rules) -> list[Issue]:
    if tag.self_closing:
        return []

    following = tag.following
    next_open = following.find(f"<{rules.target}")
    close = following.find(rules.closing_tag)

    issues: list[Issue] = []
    if close < 0 or -1 < next_open < close:
        issues.append(Issue(
            line=tag.line,
            severity=Severity.ERROR,
            message=f"Missing closing tag {rules.closing_tag}",
            suggestion=f"Add {rules.closing_tag} at the appropriate position",
        ))

    # Neither boundary found: there is no body to inspect.
    bounds = [i for i in (next_open, close) if i >= 0]
    body = following[:min(bounds)] if bounds else ""

    issue = _check_body(body, tag.line, rules)
    if issue is not None:
        issues.append(issue)
    return issues


def _check_body(body: str, line: int, rules: Rules) -> Issue | None:
    if not body.strip() or f"<{rules.wrapper}" in body:
        return None

    if any(pattern in body for pattern in rules.scope_patterns):
        return Issue(
            line=line,
            severity=Severity.ERROR,
            message='Uses scope but is missing a <template #default="scope"> wrapper',
            suggestion='Wrap the custom content in <template #default="scope">...</template>',
        )
    if _ANY_TAG.search(body):
        return Issue(
            line=line,
            severity=Severity.WARNING,
            message="Contains custom content but may be missing a <template> wrapper",
            suggestion='Consider wrapping the custom content in <template #default="scope">',
        )
    return None


# ---------------------------------------------------------------------------
# File-wide rules
# ---------------------------------------------------------------------------

def _check_legacy_slot(region: str, content: str, rules: Rules) -> list[Issue]:
    if rules.legacy_attribute not in region:
        return []
    return [Issue(
        line=line_number(content, rules.legacy_attribute),
        severity=Severity.WARNING,
        message="Uses the Vue 2 slot-scope syntax",
        suggestion='In Vue 3 use #default="scope" or v-slot:default="scope"',
    )]


def _check_components(region: str, content: str, rules: Rules) -> list[Issue]:
    column_open = f"<{rules.target}"
    wrapper_open = f"<{rules.wrapper}"
    issues: list[Issue] = []

    for name in rules.components:
        for match in opening_tag_pattern(name).finditer(region):
            before = region[:match.start()]
            last_column = before.rfind(column_open)
            if last_column < 0 or last_column < before.rfind(wrapper_open):
                continue
            text = match.group(0)
            if not _reads_row(text, rules):
                continue
            issues.append(Issue(
                line=line_number(content, text),
                severity=Severity.ERROR,
                message=f"Component <{name}> inside {rules.target} uses scope "
                        "but may be missing a template wrapper",
                suggestion='Make sure it is wrapped in <template #default="scope">',
            ))
    return issues


def _reads_row(text: str, rules: Rules) -> bool:
    return "row." in text or any(p in text for p in rules.scope_patterns)

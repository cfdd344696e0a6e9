"""Data models for scan results.

Contains the records passed from the checks to the reporter:
    - Severity
    - Issue          one finding, immutable
    - TagOccurrence  one matched opening <el-table-column> tag
    - FileResult     the issues found in one file
    - ScanSummary    totals folded over every FileResult
"""

from dataclasses import asdict, dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Issue:
    line: int
    severity: Severity
    message: str
    suggestion: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True)
class TagOccurrence:
    """An opening target tag found in the comment-stripped template.

    ``line`` refers to the original file content; ``following`` is the
    stripped template text after the tag.
    """

    text: str
    line: int
    following: str

    @property
    def self_closing(self) -> bool:
        return self.text.endswith("/>")


@dataclass(frozen=True)
class FileResult:
    path: str
    issues: tuple[Issue, ...] = ()

    @property
    def errors(self) -> int:
        return sum(1 for i in self.issues if i.severity is Severity.ERROR)

    @property
    def warnings(self) -> int:
        return sum(1 for i in self.issues if i.severity is Severity.WARNING)


@dataclass(frozen=True)
class ScanSummary:
    files_scanned: int = 0
    errors: int = 0
    warnings: int = 0
    files_with_issues: tuple[FileResult, ...] = ()
    skipped_dirs: tuple[str, ...] = ()
    unreadable: tuple[str, ...] = ()

    @property
    def total_issues(self) -> int:
        return self.errors + self.warnings

    @property
    def clean(self) -> bool:
        return self.total_issues == 0


@dataclass(frozen=True)
class Rules:
    """The tag vocabulary the checks look for."""

    target: str = "el-table-column"
    wrapper: str = "template"
    legacy_attribute: str = "slot-scope="
    scope_patterns: tuple[str, ...] = ("scope.row", "scope.$index")
    components: tuple[str, ...] = (
        "dict-tag", "el-tag", "el-button", "el-switch", "el-link", "el-input",
    )

    @property
    def closing_tag(self) -> str:
        return f"</{self.target}>"

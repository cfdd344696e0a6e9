"""Text-level helpers shared by the table checks.

Functions:
    strip_comments(text)                   -> str
    extract_template(text)                 -> str
    line_number(content, needle)           -> int
    scan_tags(region, content, rules)      -> list[TagOccurrence]

Matching is done with regular expressions, not a markup parser. Known blind
spots, kept on purpose so results stay stable for existing inputs:
    - ``//`` and ``/*`` inside attribute values or text are stripped as comments
    - only the first ``<template>...</template>`` region is inspected
    - a nested ``</template>`` ends the region early, so a column wrapped in
      ``<template #default="scope">`` loses its ``</el-table-column>``
    - identical tag text repeated in a file always reports the first line
"""

import re

from table_check.models import Rules, TagOccurrence

_MARKUP_COMMENT = re.compile(r"<!--[\s\S]*?-->")
_LINE_COMMENT   = re.compile(r"//.*$", re.MULTILINE)
_BLOCK_COMMENT  = re.compile(r"/\*[\s\S]*?\*/")
_TEMPLATE       = re.compile(r"<template>([\s\S]*?)</template>")


def strip_comments(text: str) -> str:
    """Remove markup, line and block comments, in that order."""
    text = _MARKUP_COMMENT.sub("", text)
    text = _LINE_COMMENT.sub("", text)
    return _BLOCK_COMMENT.sub("", text)


def extract_template(text: str) -> str:
    """Return the inner text of the first ``<template>`` region, or ``""``."""
    match = _TEMPLATE.search(text)
    return match.group(1) if match else ""


def line_number(content: str, needle: str) -> int:
    """1-based line of the first occurrence of *needle* in *content*.

    Falls back to line 1 when *needle* does not occur verbatim, which happens
    when comment stripping altered the matched text.
    """
    position = content.find(needle)
    if position < 0:
        return 1
    return content.count("\n", 0, position) + 1


def opening_tag_pattern(name: str) -> re.Pattern:
    return re.compile(rf"<{re.escape(name)}[^>]*>")


def scan_tags(region: str, content: str, rules: Rules = Rules()) -> list[TagOccurrence]:
    """Find every opening target tag in the stripped *region*.

    Line numbers are resolved against the original *content* so they match
    what an editor shows.
    """
    return [
        TagOccurrence(
            text=m.group(0),
            line=line_number(content, m.group(0)),
            following=region[m.end():],
        )
        for m in opening_tag_pattern(rules.target).finditer(region)
    ]

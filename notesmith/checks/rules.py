"""Structural rules enforced on notes before they are committed."""

from __future__ import annotations

import json
import re

from notesmith.errors import NoteValidationError
from notesmith.walker import get_lines

# a bullet item, one blank line, then the next bullet
_LOOSE_LIST_RE = re.compile(r"- +[^\r\n]+(\r\n\r\n|\r\r|\n\n)\s*-")

# README files are normalized upstream: two front matter lines between
# delimiters, so the title sits on the third line
_TITLE_LINE_INDEX = 2


def check_directory_title(readme_contents: str, directory_name: str, readme_path: str) -> str:
    """Return the custom title of a directory README, or raise."""
    lines = get_lines(readme_contents)
    title_line = lines[_TITLE_LINE_INDEX] if len(lines) > _TITLE_LINE_INDEX else ""

    if not title_line.startswith("# "):
        raise NoteValidationError(f"No title found in file {readme_path}", readme_path)

    title = title_line[2:]
    if title == directory_name:
        raise NoteValidationError(f"No custom title set in file {readme_path}", readme_path)
    return title


def check_contents_heading(contents: str, path: str, heading: str = "## Contents") -> None:
    if heading not in get_lines(contents):
        raise NoteValidationError(f"No 'Contents' heading found in file {path}", path)


def check_no_loose_lists(contents: str, path: str) -> None:
    match = _LOOSE_LIST_RE.search(contents)
    if match:
        raise NoteValidationError(
            f"Loose list found in file {path}\nMatch: {json.dumps(match.group(0))}", path
        )

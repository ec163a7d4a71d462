"""Pre-commit checks: directory titles, note structure and last_modified stamping."""

from notesmith.checks.checker import NoteChecker
from notesmith.checks.models import CheckReport
from notesmith.checks.rules import (
    check_contents_heading,
    check_directory_title,
    check_no_loose_lists,
)
from notesmith.checks.stamper import LastModifiedStamper, format_timestamp

__all__ = [
    "CheckReport",
    "LastModifiedStamper",
    "NoteChecker",
    "check_contents_heading",
    "check_directory_title",
    "check_no_loose_lists",
    "format_timestamp",
]

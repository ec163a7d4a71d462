"""NoteChecker: the pre-commit pass over the whole notes tree."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from notesmith.checks.models import CheckReport
from notesmith.checks.rules import (
    check_contents_heading,
    check_directory_title,
    check_no_loose_lists,
)
from notesmith.checks.stamper import LastModifiedStamper
from notesmith.config.models import NotesmithConfig
from notesmith.errors import NoteValidationError
from notesmith.vcs.git import GitClient
from notesmith.walker import DirectoryWalker, Entry, EntryKind

logger = logging.getLogger(__name__)


class NoteChecker:
    """Validates directory titles and notes, then stamps ``last_modified``.

    Stops at the first violation; nothing is rolled back.
    """

    def __init__(self, root: Path, config: NotesmithConfig, git: GitClient | None = None) -> None:
        self.root = Path(root)
        self.config = config
        self.git = git or GitClient(self.root, config.git)
        self.walker = DirectoryWalker(self.root, config.notes)

    def run(self) -> CheckReport:
        start = time.monotonic()
        report = CheckReport()
        stamper = LastModifiedStamper(self.root, self.git, self.git.staged_files())

        for entry in self.walker.walk():
            if entry.kind is EntryKind.DIRECTORY:
                self._check_directory(entry)
                report.directories += 1
            elif entry.kind is EntryKind.NOTE:
                if self._check_note(entry, stamper):
                    report.stamped.append(entry.posix_path)
                report.notes += 1

        report.duration = time.monotonic() - start
        return report

    def _check_directory(self, entry: Entry) -> None:
        readme = entry.path / self.config.notes.readme_name
        readme_path = readme.as_posix()
        try:
            contents = (self.root / readme).read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NoteValidationError(f"Missing {readme.name} in directory {entry.posix_path}", readme_path) from e
        check_directory_title(contents, entry.name, readme_path)
        logger.debug("directory ok: %s", entry.posix_path)

    def _check_note(self, entry: Entry, stamper: LastModifiedStamper) -> bool:
        contents = (self.root / entry.path).read_text(encoding="utf-8")
        check_contents_heading(contents, entry.posix_path, self.config.notes.contents_heading)
        check_no_loose_lists(contents, entry.posix_path)
        logger.debug("note ok: %s", entry.posix_path)
        return stamper.stamp(contents, entry.path)

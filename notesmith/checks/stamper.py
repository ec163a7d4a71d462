"""Maintains the ``last_modified`` front matter field of notes."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from notesmith.frontmatter import parse_front_matter, serialize_front_matter
from notesmith.vcs.git import GitClient
from notesmith.walker import to_posix

logger = logging.getLogger(__name__)

LAST_MODIFIED_KEY = "last_modified"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """2024-05-01T10:00:00.000Z"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LastModifiedStamper:
    """Sets ``last_modified`` to now for staged notes, or backfills it from git history.

    | staged | has value | action                  |
    |--------|-----------|-------------------------|
    | no     | yes       | nothing                 |
    | yes    | any       | now                     |
    | no     | no        | last commit timestamp   |
    """

    def __init__(
        self,
        root: Path,
        git: GitClient,
        staged_files: frozenset[str],
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.root = Path(root)
        self.git = git
        self.staged_files = staged_files
        self.clock = clock

    def stamp(self, contents: str, relative_path: Path) -> bool:
        """Rewrite the note if needed. Returns True when the file was written."""
        rel = to_posix(relative_path)
        is_staged = rel in self.staged_files
        parsed = parse_front_matter(contents, rel)
        attributes = dict(parsed.attributes)

        if not is_staged and attributes.get(LAST_MODIFIED_KEY):
            return False

        if is_staged:
            attributes[LAST_MODIFIED_KEY] = format_timestamp(self.clock())
        else:
            committed = self.git.last_commit_timestamp(relative_path)
            if committed is None:
                logger.warning("no commit history for %s, leaving last_modified unset", rel)
                return False
            attributes[LAST_MODIFIED_KEY] = committed

        new_contents = serialize_front_matter(attributes) + "\n\n" + parsed.body
        (self.root / relative_path).write_text(new_contents, encoding="utf-8")
        logger.info("set %s=%s in %s", LAST_MODIFIED_KEY, attributes[LAST_MODIFIED_KEY], rel)
        return True

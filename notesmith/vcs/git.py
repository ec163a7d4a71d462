"""Thin wrapper over the git CLI: staged paths and last commit timestamps."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from notesmith.config.models import GitConfig
from notesmith.errors import GitError
from notesmith.walker import to_posix

logger = logging.getLogger(__name__)


class GitClient:
    """Runs read-only git queries against the repository at ``root``."""

    def __init__(self, root: Path, config: GitConfig | None = None) -> None:
        self.root = Path(root)
        self.config = config or GitConfig()

    def staged_files(self) -> frozenset[str]:
        """Repository-relative, forward-slash paths of the currently staged files."""
        output = self._run(["diff", "--name-only", "--cached"])
        return frozenset(line for line in output.splitlines() if line)

    def last_commit_timestamp(self, relative_path: Path | str) -> str | None:
        """Committer date (strict ISO-8601) of the last commit touching a file.

        Returns None when the file has no history yet.
        """
        output = self._run(["log", "-1", "--format=%cI", "--", to_posix(relative_path)])
        return output.strip() or None

    def _run(self, args: list[str]) -> str:
        command = [self.config.executable, *args]
        logger.debug("running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=self.root,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
            )
        except FileNotFoundError as e:
            raise GitError(command, f"executable not found: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise GitError(command, f"timed out after {self.config.timeout}s") from e

        if result.returncode != 0:
            raise GitError(command, f"exit {result.returncode}: {result.stderr.strip()[:200]}")
        return result.stdout

"""Exception types shared by both pipelines."""

from __future__ import annotations


class NotesmithError(Exception):
    """Base class for errors that abort a run."""


class NoteValidationError(NotesmithError):
    """A note, directory or front matter block breaks a structural rule."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class GitError(NotesmithError):
    """Wraps a failed git invocation with the command that was run."""

    def __init__(self, command: list[str], cause: str) -> None:
        self.command = command
        super().__init__(f"git command failed ({' '.join(command)}): {cause}")

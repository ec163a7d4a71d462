"""Directory walking over the notes tree, shared by the check and build pipelines."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath

from notesmith.config.models import NotesConfig

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    NOTE = "note"
    IMAGES = "images"


@dataclass(frozen=True)
class Entry:
    """A classified child of a notes directory; path is relative to the root."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def posix_path(self) -> str:
        return self.path.as_posix()


def to_posix(path: PurePath | str) -> str:
    """Forward-slash form of a relative path, whatever the host separator."""
    return str(path).replace("\\", "/")


def get_lines(contents: str) -> list[str]:
    return _LINE_BREAK_RE.split(contents)


class DirectoryWalker:
    """Enumerates notes directories, note files and image folders below a root.

    Directories starting with one of the ignored prefixes (or named like a
    dependency cache) are skipped, except for the images folder which is
    reported but never descended into.
    """

    def __init__(self, root: Path, config: NotesConfig, *, files_first: bool = False) -> None:
        self.root = Path(root)
        self.config = config
        self.files_first = files_first

    # -- predicates ----------------------------------------------------------

    def is_notes_directory(self, name: str) -> bool:
        if any(name.startswith(prefix) for prefix in self.config.ignored_dir_prefixes):
            return False
        return name not in self.config.ignored_dir_names

    def is_images_directory(self, name: str) -> bool:
        return name == self.config.images_dir_name

    def is_note_file(self, name: str) -> bool:
        return name.endswith(self.config.note_suffix) and name not in self.config.excluded_file_names

    # -- traversal -----------------------------------------------------------

    def entries(self, relative: Path = Path()) -> list[Entry]:
        """Classify the children of one directory, skipping everything else."""
        children = sorted((self.root / relative).iterdir(), key=lambda p: p.name)
        if self.files_first:
            children = [c for c in children if not c.is_dir()] + [c for c in children if c.is_dir()]

        result: list[Entry] = []
        for child in children:
            rel = relative / child.name
            if child.is_dir():
                if self.is_images_directory(child.name):
                    result.append(Entry(rel, EntryKind.IMAGES))
                elif self.is_notes_directory(child.name):
                    result.append(Entry(rel, EntryKind.DIRECTORY))
                else:
                    logger.debug("skipping directory %s", rel)
            elif self.is_note_file(child.name):
                result.append(Entry(rel, EntryKind.NOTE))
        return result

    def walk(self, relative: Path = Path()) -> Iterator[Entry]:
        """Yield entries depth first; a directory comes before its contents."""
        for entry in self.entries(relative):
            yield entry
            if entry.kind is EntryKind.DIRECTORY:
                yield from self.walk(entry.path)

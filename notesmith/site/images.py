"""Copies per-directory image folders into the website's image tree."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class ImageRelocator:
    """``topic/_img/note/pic.png`` -> ``<target>/topic/note/pic.png``, lower-cased.

    Every relative segment is lower-cased so the files line up with the
    lower-cased image URLs written into the docs.
    """

    def __init__(self, root: Path, target_dir: Path) -> None:
        self.root = Path(root)
        self.target_dir = Path(target_dir)

    def relocate(self, images_dir: Path) -> int:
        """Copy each child of a relative images folder. Returns the number of children copied."""
        source_dir = self.root / images_dir
        parent = Path(images_dir.parent.as_posix().lower())
        count = 0
        for child in sorted(source_dir.iterdir(), key=lambda p: p.name):
            self._copy(child, self.target_dir / parent / child.name.lower())
            count += 1
        logger.debug("relocated %d image entries from %s", count, images_dir.as_posix())
        return count

    def _copy(self, source: Path, target: Path) -> None:
        if source.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            for child in sorted(source.iterdir(), key=lambda p: p.name):
                self._copy(child, target / child.name.lower())
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)

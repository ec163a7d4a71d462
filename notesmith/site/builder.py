"""SiteBuilder: regenerates the website docs, images and sidebar from the notes."""

from __future__ import annotations

import logging
import shutil
import time
from pathlib import Path

from notesmith.config.models import NotesmithConfig
from notesmith.errors import NoteValidationError
from notesmith.site.images import ImageRelocator
from notesmith.site.models import BuildReport
from notesmith.site.sidebar import SidebarBuilder
from notesmith.site.transform import (
    LinkRewriter,
    NoteTransformer,
    TitleReplacer,
    TocStripper,
    TransformPipeline,
)
from notesmith.walker import DirectoryWalker, EntryKind

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Deletes previous output and writes everything again; no incremental mode."""

    def __init__(self, root: Path, config: NotesmithConfig) -> None:
        self.root = Path(root)
        self.config = config
        website = config.website
        self.docs_dir = self.root / website.docs_dir
        self.static_docs_dir = self.root / website.static_docs_dir
        self.images_dir = self.root / website.images_dir

        self.walker = DirectoryWalker(self.root, config.notes, files_first=True)
        self.sidebar = SidebarBuilder(self.root, config.notes, website)
        self.images = ImageRelocator(self.root, self.images_dir)
        self.transformer = NoteTransformer(TransformPipeline([
            TocStripper(config.notes.contents_heading),
            LinkRewriter(website.images_url),
            TitleReplacer(),
        ]))

    def build(self) -> BuildReport:
        start = time.monotonic()
        report = BuildReport()

        logger.info("removing old website data")
        self.clean()

        logger.info("writing new website data")
        self.copy_static_docs()
        manifest = self.sidebar.build()
        self.sidebar.write(manifest)
        report.sidebar_items = len(manifest["docs"])

        for entry in self.walker.walk():
            if entry.kind is EntryKind.IMAGES:
                report.image_entries += self.images.relocate(entry.path)
            elif entry.kind is EntryKind.NOTE:
                self.write_doc(entry.path)
                report.docs += 1

        report.duration = time.monotonic() - start
        return report

    def clean(self) -> None:
        for path in (self.docs_dir, self.images_dir):
            if path.exists():
                shutil.rmtree(path)
                logger.debug("removed %s", path)

    def copy_static_docs(self) -> None:
        if not self.static_docs_dir.is_dir():
            raise NoteValidationError(
                f"Static docs directory not found: {self.config.website.static_docs_dir}"
            )
        shutil.copytree(self.static_docs_dir, self.docs_dir)

    def write_doc(self, relative_path: Path) -> Path:
        rel = relative_path.as_posix()
        contents = (self.root / relative_path).read_text(encoding="utf-8")
        new_contents = self.transformer.transform(contents, rel)
        target = self.docs_dir / rel.lower()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(new_contents, encoding="utf-8")
        logger.info("wrote %s (%d bytes)", target.relative_to(self.root).as_posix(), len(new_contents))
        return target

"""Builds the website sidebar manifest from the notes tree.

Produces ``sidebars.js``: a ``module.exports`` assignment holding nested
categories that mirror the directory structure, with one leaf per note.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from notesmith.config.models import NotesConfig, WebsiteConfig
from notesmith.errors import NoteValidationError
from notesmith.site.transform.links import normalize_url, remove_markdown_extension
from notesmith.walker import DirectoryWalker, EntryKind, get_lines

SidebarItem = Union[str, dict]


def doc_id(relative_path: Path | str) -> str:
    """topic/Some-Note.md -> topic/some-note"""
    return normalize_url(remove_markdown_extension(str(relative_path)))


def category(label: str, items: list[SidebarItem]) -> dict:
    return {"type": "category", "label": label, "items": items}


class SidebarBuilder:
    def __init__(self, root: Path, notes: NotesConfig, website: WebsiteConfig) -> None:
        self.root = Path(root)
        self.notes = notes
        self.website = website
        self.walker = DirectoryWalker(self.root, notes, files_first=True)

    def build(self) -> dict:
        """Full manifest, the fixed About category first."""
        about = category(self.website.about_label, list(self.website.about_items))
        return {"docs": [about, *self.items_for_directory(Path())]}

    def items_for_directory(self, relative: Path) -> list[SidebarItem]:
        items: list[SidebarItem] = []
        for entry in self.walker.entries(relative):
            if entry.kind is EntryKind.DIRECTORY:
                title = self.title_for_directory(entry.path)
                items.append(category(title, self.items_for_directory(entry.path)))
            elif entry.kind is EntryKind.NOTE:
                items.append(doc_id(entry.path))
        return items

    def title_for_directory(self, relative: Path) -> str:
        # README front matter length varies, so scan for the first title line
        readme = self.root / relative / self.notes.readme_name
        try:
            contents = readme.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NoteValidationError(
                f"No title found for file {relative.as_posix()}: missing {self.notes.readme_name}",
                relative.as_posix(),
            ) from e

        for line in get_lines(contents):
            if line.startswith("# "):
                return line[2:]
        raise NoteValidationError(f"No title found for file {relative.as_posix()}", relative.as_posix())

    def render(self, manifest: dict | None = None) -> str:
        manifest = manifest if manifest is not None else self.build()
        return "module.exports = " + json.dumps(manifest, indent=4, ensure_ascii=False)

    def write(self, manifest: dict | None = None) -> Path:
        """Write sidebars.js below the root. Returns the path."""
        out = self.root / self.website.sidebars_file
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.render(manifest), encoding="utf-8")
        return out

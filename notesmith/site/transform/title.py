"""Swaps the note's title line for website front matter and the description."""

import re

from notesmith.errors import NoteValidationError
from notesmith.frontmatter import DocFrontMatter

from .pipeline import NoteContext, Transform

_FIRST_LINE_RE = re.compile(r"[^\r\n]*")


class TitleReplacer(Transform):
    def apply(self, content: str, note: NoteContext) -> str:
        title_line = _FIRST_LINE_RE.match(content).group(0)
        if not title_line.startswith("# "):
            raise NoteValidationError(
                f"Problem with file {note.relative_path}: first line is not a title",
                note.relative_path,
            )

        title = title_line[2:]
        # the site renderer can't show code in titles
        if "`" in title:
            raise NoteValidationError(
                f"Problem with file {note.relative_path}: code in note title is not supported",
                note.relative_path,
            )

        fm = note.front_matter
        doc_fm = DocFrontMatter(
            title=title,
            description=fm.description,
            sidebar_label=fm.tree_title,
        )
        rest = content[len(title_line):]
        return doc_fm.render() + "\n\n" + fm.description + rest

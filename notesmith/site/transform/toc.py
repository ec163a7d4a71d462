"""Removes the table of contents block from a note."""

from notesmith.errors import NoteValidationError

from .pipeline import NoteContext, Transform


class TocStripper(Transform):
    def __init__(self, heading: str = "## Contents"):
        self.heading = heading

    def apply(self, content: str, note: NoteContext) -> str:
        start = content.find(self.heading)
        if start == -1:
            raise NoteValidationError(
                f"Problem with {note.relative_path}: no '{self.heading}' heading found.",
                note.relative_path,
            )
        next_heading = content.find("## ", start + 1)
        if next_heading == -1:
            raise NoteValidationError(
                f"Problem with {note.relative_path}: no heading found after '{self.heading}'.",
                note.relative_path,
            )
        return content[:start] + content[next_heading:]

"""TransformPipeline: runs ordered transforms on a note body before it is written as a doc."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from notesmith.frontmatter import SourceFrontMatter


@dataclass(frozen=True)
class NoteContext:
    """What transforms know about the note being converted."""

    relative_path: str  # forward slashes, relative to the notes root
    front_matter: SourceFrontMatter


class Transform(ABC):
    @abstractmethod
    def apply(self, content: str, note: NoteContext) -> str:
        """Transform markdown content of the note described by ``note``."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, content: str, note: NoteContext) -> str:
        for t in self.transforms:
            content = t.apply(content, note)
        return content

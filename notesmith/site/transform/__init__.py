"""Transform pipeline for converting notes into website docs."""

from .pipeline import NoteContext, Transform, TransformPipeline
from .toc import TocStripper
from .links import LinkRewriter
from .title import TitleReplacer
from .note import NoteTransformer

__all__ = [
    "LinkRewriter",
    "NoteContext",
    "NoteTransformer",
    "TitleReplacer",
    "TocStripper",
    "Transform",
    "TransformPipeline",
]

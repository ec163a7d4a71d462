"""NoteTransformer: converts one note into a website doc."""

from __future__ import annotations

from notesmith.frontmatter import SourceFrontMatter, parse_front_matter

from .links import LinkRewriter
from .pipeline import NoteContext, TransformPipeline
from .title import TitleReplacer
from .toc import TocStripper


class NoteTransformer:
    """Parses the note's front matter, then runs the doc transforms on its body.

    The default pipeline strips the table of contents, rewrites links and
    images, and finally swaps the title line for website front matter.
    """

    def __init__(self, pipeline: TransformPipeline | None = None):
        self.pipeline = pipeline or TransformPipeline([
            TocStripper(),
            LinkRewriter(),
            TitleReplacer(),
        ])

    def transform(self, contents: str, relative_path: str) -> str:
        parsed = parse_front_matter(contents, relative_path)
        front_matter = SourceFrontMatter.from_attributes(parsed.attributes, relative_path)
        note = NoteContext(relative_path=relative_path, front_matter=front_matter)
        return self.pipeline.apply(parsed.body.lstrip(), note)

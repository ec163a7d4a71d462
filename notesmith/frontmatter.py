"""Front matter parsing and serialization for notes and generated docs.

Notes carry a YAML block between ``---`` lines. Values are kept as plain
strings (PyYAML's ``BaseLoader``) so that timestamps and numbers survive a
rewrite byte for byte.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from notesmith.errors import NoteValidationError

_FRONT_MATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
_LEADING_BLANK_LINES_RE = re.compile(r"\A(?:[ \t]*\r?\n)+")


@dataclass(frozen=True)
class ParsedNote:
    attributes: dict[str, str]
    body: str


def split_front_matter(content: str) -> tuple[str | None, str]:
    """Split content into (yaml_block, body).

    yaml_block is None when the content has no front matter. Blank lines
    right after the closing delimiter are dropped from the body.
    """
    match = _FRONT_MATTER_RE.match(content)
    if match is None:
        return None, content
    body = _LEADING_BLANK_LINES_RE.sub("", content[match.end():], count=1)
    return match.group(1), body


def parse_front_matter(content: str, source: str = "<string>") -> ParsedNote:
    """Parse front matter into an ordered mapping of string attributes."""
    block, body = split_front_matter(content)
    if block is None:
        return ParsedNote(attributes={}, body=body)

    try:
        loaded = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise NoteValidationError(f"Invalid front matter in file {source}: {exc}", source) from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise NoteValidationError(
            f"Front matter in file {source} is not a mapping, got {type(loaded).__name__}",
            source,
        )

    attributes: dict[str, str] = {}
    for key, value in loaded.items():
        if not isinstance(value, str):
            raise NoteValidationError(
                f"Front matter attribute {key!r} in file {source} must be a plain string",
                source,
            )
        attributes[str(key)] = value
    return ParsedNote(attributes=attributes, body=body)


def format_value(value: str) -> str:
    """Render a scalar plainly when a YAML reader gets it back unchanged, else quote it."""
    plain = f"key: {value}"
    try:
        if yaml.load(plain, Loader=yaml.BaseLoader) == {"key": value}:
            return value
    except yaml.YAMLError:
        pass
    quoted = yaml.dump(value, default_style='"', allow_unicode=True, width=float("inf"))
    return quoted.removesuffix("\n...\n").rstrip("\n")


def serialize_front_matter(attributes: dict[str, str]) -> str:
    """Render attributes as a ``---`` delimited block, in iteration order."""
    lines = [f"{key}: {format_value(value)}" for key, value in attributes.items()]
    return "---\n" + "\n".join(lines) + "\n---"


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------


class SourceFrontMatter(BaseModel):
    """Front matter accepted on a note that is published to the website."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    description: str
    tree_title: str | None = None
    # maintained by the pre-commit pass, not carried into the doc
    last_modified: str | None = None

    @field_validator("description")
    @classmethod
    def _description_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("description must not be empty")
        return v

    @field_validator("tree_title")
    @classmethod
    def _empty_tree_title_is_none(cls, v: str | None) -> str | None:
        return v or None

    @classmethod
    def from_attributes(cls, attributes: dict[str, str], source: str) -> SourceFrontMatter:
        if not attributes.get("description"):
            raise NoteValidationError(
                f"Problem with {source}: front matter doesn't contain description.", source
            )
        try:
            return cls(**attributes)
        except ValidationError as exc:
            if any(err["type"] == "extra_forbidden" for err in exc.errors()):
                raise NoteValidationError(
                    f"Problem with {source}: unexpected attribute in front matter.", source
                ) from exc
            raise NoteValidationError(f"Problem with {source}: {exc}", source) from exc


class DocFrontMatter(BaseModel):
    """Front matter of a generated website doc."""

    title: str
    description: str
    sidebar_label: str | None = None

    def render(self) -> str:
        return serialize_front_matter(self.model_dump(exclude_none=True))

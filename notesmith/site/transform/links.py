"""Rewrites image paths and links of a note for the website.

The note is parsed with markdown-it-py, the token stream is rebuilt with
rewritten tokens (the parsed stream is never mutated) and rendered back to
markdown with mdformat's renderer.
"""

from __future__ import annotations

import posixpath

import mdurl
from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdformat.renderer import MDRenderer

from notesmith.errors import NoteValidationError

from .pipeline import NoteContext, Transform

_EXTERNAL_ANCHOR = '<a href="{href}" target="_blank" rel="nofollow noopener noreferrer">{text}</a>'


def normalize_url(url: str) -> str:
    return url.replace("\\", "/").lower()


def remove_markdown_extension(url: str) -> str:
    return url.replace(".md", "", 1)


def _build_parser() -> MarkdownIt:
    mdit = MarkdownIt("commonmark", renderer_cls=MDRenderer)
    mdit.options["mdformat"] = {"wrap": "keep", "number": True, "end_of_line": "lf"}
    mdit.options["parser_extension"] = []
    mdit.options["codeformatters"] = {}
    return mdit


def _without_label(meta: dict) -> dict:
    # a reference label would make the renderer print the old definition
    return {k: v for k, v in meta.items() if k != "label"}


def _find_link_close(tokens: list[Token], open_index: int) -> int:
    depth = 0
    for index in range(open_index, len(tokens)):
        if tokens[index].type == "link_open":
            depth += 1
        elif tokens[index].type == "link_close":
            depth -= 1
            if depth == 0:
                return index
    raise ValueError("unbalanced link tokens")


class LinkRewriter(Transform):
    """Points images at the relocated image tree and adapts links to doc ids.

    External links (``http...``) become HTML anchors opening in a new tab;
    only links whose content is a single piece of text are supported.
    """

    def __init__(self, images_url: str = "/img/from-notes"):
        self.images_url = images_url
        self._parser = _build_parser()

    def apply(self, content: str, note: NoteContext) -> str:
        env: dict = {}
        tokens = self._parser.parse(content, env)
        rewritten = [self._rewrite_block(token, note) for token in tokens]
        return self._parser.renderer.render(rewritten, self._parser.options, env)

    # -- token rewriting -----------------------------------------------------

    def _rewrite_block(self, token: Token, note: NoteContext) -> Token:
        if token.type != "inline" or not token.children:
            return token
        return token.copy(children=self._rewrite_inline(token.children, note))

    def _rewrite_inline(self, tokens: list[Token], note: NoteContext) -> list[Token]:
        result: list[Token] = []
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if token.type == "image":
                result.append(self._rewrite_image(token, note))
                index += 1
            elif token.type == "link_open":
                close = _find_link_close(tokens, index)
                inner = self._rewrite_inline(tokens[index + 1:close], note)
                result.extend(self._rewrite_link(token, inner, tokens[close], note))
                index = close + 1
            else:
                result.append(token)
                index += 1
        return result

    def _rewrite_image(self, token: Token, note: NoteContext) -> Token:
        # targets arrive percent-encoded; lower-case the decoded form
        src = mdurl.decode(str(token.attrs.get("src", "")))
        filename = posixpath.basename(normalize_url(src))
        folder = remove_markdown_extension(note.relative_path)
        new_src = normalize_url(posixpath.join(self.images_url, folder, filename))
        return token.copy(attrs={**token.attrs, "src": new_src}, meta=_without_label(token.meta))

    def _rewrite_link(
        self, link_open: Token, inner: list[Token], link_close: Token, note: NoteContext
    ) -> list[Token]:
        href = str(link_open.attrs.get("href", ""))

        if not href.startswith("http"):
            new_href = normalize_url(remove_markdown_extension(mdurl.decode(href)))
            if not href.startswith("."):
                new_href = "./" + new_href
            new_open = link_open.copy(
                attrs={**link_open.attrs, "href": new_href},
                meta=_without_label(link_open.meta),
                info="",
            )
            return [new_open, *inner, link_close.copy(info="")]

        if len(inner) != 1 or inner[0].type != "text":
            child_types = ",".join(t.type for t in inner)
            raise NoteValidationError(
                f"Problem with {note.relative_path}: only links with single 'text' child are supported."
                "\n"
                f"Now found types [{child_types}] for link with URL {href}.",
                note.relative_path,
            )

        html = _EXTERNAL_ANCHOR.format(href=href, text=inner[0].content)
        return [Token("html_inline", "", 0, content=html)]

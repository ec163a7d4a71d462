"""Tests for the note to doc transforms."""

import pytest

from notesmith.errors import NoteValidationError
from notesmith.frontmatter import SourceFrontMatter
from notesmith.site.transform import (
    LinkRewriter,
    NoteContext,
    NoteTransformer,
    TitleReplacer,
    TocStripper,
    Transform,
    TransformPipeline,
)
from notesmith.site.transform.links import normalize_url, remove_markdown_extension

from helpers import make_note


def _note(path="topic/note.md", description="A note.", tree_title=None):
    return NoteContext(
        relative_path=path,
        front_matter=SourceFrontMatter(description=description, tree_title=tree_title),
    )


# ---------------------------------------------------------------------------
# TocStripper
# ---------------------------------------------------------------------------


class TestTocStripper:
    def test_removes_up_to_next_heading(self):
        content = "# T\n\n## Contents\n\n- [Next](#next)\n\n## Next\n\nBody\n"
        assert TocStripper().apply(content, _note()) == "# T\n\n## Next\n\nBody\n"

    def test_missing_heading(self):
        with pytest.raises(NoteValidationError, match="no '## Contents' heading"):
            TocStripper().apply("# T\n\n## Next\n", _note())

    def test_no_following_heading(self):
        with pytest.raises(NoteValidationError, match="no heading found after"):
            TocStripper().apply("# T\n\n## Contents\n\n- a\n", _note())

    def test_custom_heading(self):
        content = "# T\n\n## Index\n\n- a\n\n## Next\n"
        assert TocStripper("## Index").apply(content, _note()) == "# T\n\n## Next\n"


# ---------------------------------------------------------------------------
# LinkRewriter
# ---------------------------------------------------------------------------


class TestUrlHelpers:
    def test_normalize_url(self):
        assert normalize_url("Sub\\Some-Note.md") == "sub/some-note.md"

    def test_only_first_extension_removed(self):
        assert remove_markdown_extension("a.md/b.md") == "a/b.md"


class TestLinkRewriter:
    def setup_method(self):
        self.rewriter = LinkRewriter("/img/from-notes")

    def test_internal_link_gets_dot_slash(self):
        out = self.rewriter.apply("[x](sub/note.md)\n", _note())
        assert out == "[x](./sub/note)\n"

    def test_relative_link_kept_relative(self):
        out = self.rewriter.apply("[x](./sub/Note.md)\n", _note())
        assert out == "[x](./sub/note)\n"

    def test_parent_link(self):
        out = self.rewriter.apply("[x](../Other.md)\n", _note())
        assert out == "[x](../other)\n"

    def test_external_link_becomes_anchor(self):
        out = self.rewriter.apply("See [site](https://example.com).\n", _note())
        assert out == (
            'See <a href="https://example.com" target="_blank" '
            'rel="nofollow noopener noreferrer">site</a>.\n'
        )

    def test_external_link_with_formatting_rejected(self):
        with pytest.raises(NoteValidationError) as exc_info:
            self.rewriter.apply("[*em* text](https://example.com)\n", _note())
        message = str(exc_info.value)
        assert "only links with single 'text' child are supported" in message
        assert "[em_open,text,em_close,text]" in message
        assert "https://example.com" in message

    def test_image_moved_to_note_folder(self):
        out = self.rewriter.apply("![Diagram](_img/Note/Diagram.PNG)\n", _note("Topic/Note.md"))
        assert out == "![Diagram](/img/from-notes/topic/note/diagram.png)\n"

    def test_non_ascii_image_lower_cased_after_decoding(self):
        out = self.rewriter.apply("![d](_img/Note/Über.png)\n", _note("Topic/Note.md"))
        assert out == "![d](/img/from-notes/topic/note/über.png)\n"

    def test_non_ascii_link_lower_cased_after_decoding(self):
        out = self.rewriter.apply("[x](Über.md)\n", _note())
        assert out == "[x](./über)\n"

    def test_ordered_list_numbered_in_sequence(self):
        out = self.rewriter.apply("1. [a](a.md)\n2. b\n3. c\n", _note())
        assert out == "1. [a](./a)\n2. b\n3. c\n"

    def test_link_inside_list(self):
        out = self.rewriter.apply("- [x](a.md)\n- [y](b.md)\n", _note())
        assert out == "- [x](./a)\n- [y](./b)\n"

    def test_reference_link_rendered_inline(self):
        out = self.rewriter.apply("[x][ref]\n\n[ref]: other.md\n", _note())
        assert out == "[x](./other)\n"


# ---------------------------------------------------------------------------
# TitleReplacer
# ---------------------------------------------------------------------------


class TestTitleReplacer:
    def test_replaces_title_with_front_matter(self):
        out = TitleReplacer().apply("# My Title\n\n## Next\n", _note(description="Desc"))
        assert out == (
            "---\n"
            "title: My Title\n"
            "description: Desc\n"
            "---\n"
            "\n"
            "Desc\n"
            "\n"
            "## Next\n"
        )

    def test_tree_title_becomes_sidebar_label(self):
        out = TitleReplacer().apply("# Long Title\n", _note(description="D", tree_title="Short"))
        assert out.startswith("---\ntitle: Long Title\ndescription: D\nsidebar_label: Short\n---\n")

    def test_code_in_title_rejected(self):
        with pytest.raises(NoteValidationError, match="code in note title is not supported"):
            TitleReplacer().apply("# The `foo` function\n", _note())

    def test_first_line_must_be_title(self):
        with pytest.raises(NoteValidationError, match="first line is not a title"):
            TitleReplacer().apply("Intro\n# Title\n", _note())

    def test_title_with_colon_is_quoted(self):
        out = TitleReplacer().apply("# Python: Basics\n", _note(description="D"))
        assert 'title: "Python: Basics"' in out


# ---------------------------------------------------------------------------
# Pipeline / NoteTransformer
# ---------------------------------------------------------------------------


class _Upper(Transform):
    def apply(self, content, note):
        return content.upper()


class _Suffix(Transform):
    def apply(self, content, note):
        return content + note.relative_path


class TestTransformPipeline:
    def test_runs_in_order(self):
        pipeline = TransformPipeline([_Upper(), _Suffix()])
        assert pipeline.apply("a", _note("x.md")) == "Ax.md"

    def test_empty_pipeline(self):
        assert TransformPipeline([]).apply("a", _note()) == "a"


class TestNoteTransformer:
    def test_full_note(self):
        contents = make_note("Sub Note", extra="tree_title: Sub\n")
        out = NoteTransformer().transform(contents, "Topic/Sub-Note.md")
        assert out == (
            "---\n"
            "title: Sub Note\n"
            "description: A note.\n"
            "sidebar_label: Sub\n"
            "---\n"
            "\n"
            "A note.\n"
            "\n"
            "## Section\n"
            "\n"
            "Some text.\n"
        )

    def test_contents_block_replaced_by_description(self):
        contents = "---\ndescription: \"x\"\n---\n# Title\n\n## Contents\n...\n## Next\nBody"
        out = NoteTransformer().transform(contents, "n.md")
        # blocks come out separated by a blank line
        assert out == "---\ntitle: Title\ndescription: x\n---\n\nx\n\n## Next\n\nBody\n"

    def test_missing_description(self):
        contents = "---\ntree_title: T\n---\n\n# T\n\n## Contents\n\n## Next\n"
        with pytest.raises(NoteValidationError, match="front matter doesn't contain description"):
            NoteTransformer().transform(contents, "n.md")

    def test_unexpected_attribute(self):
        contents = make_note(extra="author: me\n")
        with pytest.raises(NoteValidationError, match="unexpected attribute in front matter"):
            NoteTransformer().transform(contents, "n.md")

    def test_last_modified_is_not_published(self):
        contents = make_note(extra="last_modified: 2024-05-01T10:00:00.000Z\n")
        out = NoteTransformer().transform(contents, "n.md")
        assert "last_modified" not in out
        assert out.startswith("---\ntitle: Title\ndescription: A note.\n---\n")

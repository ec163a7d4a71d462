"""File builders shared by the test modules."""

from pathlib import Path


def write(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def make_readme(title: str) -> str:
    """A directory README as the notes tree generator leaves it: title on the third line."""
    return f"<!-- generated -->\n\n# {title}\n\n<!-- generated notes tree -->\n"


def make_note(title: str = "Title", description: str = "A note.", extra: str = "") -> str:
    return (
        "---\n"
        f"description: {description}\n"
        f"{extra}"
        "---\n"
        "\n"
        f"# {title}\n"
        "\n"
        "## Contents\n"
        "\n"
        "- [Section](#section)\n"
        "\n"
        "## Section\n"
        "\n"
        "Some text.\n"
    )

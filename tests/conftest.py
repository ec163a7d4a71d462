"""Shared test fixtures for notesmith."""

from unittest.mock import MagicMock

import pytest

from notesmith.config.models import NotesmithConfig
from notesmith.vcs.git import GitClient

from helpers import make_note, make_readme, write


@pytest.fixture
def sample_config():
    return NotesmithConfig()


@pytest.fixture
def mock_git():
    git = MagicMock(spec=GitClient)
    git.staged_files.return_value = frozenset()
    git.last_commit_timestamp.return_value = "2023-01-02T03:04:05+01:00"
    return git


@pytest.fixture
def notes_repo(tmp_path):
    """A small notes repository with one topic directory and the website skeleton."""
    write(tmp_path, "README.md", "# Notes\n")
    write(tmp_path, "CONTRIBUTING.md", "# Contributing\n")
    write(tmp_path, "Root-Note.md", make_note("Root Note"))
    write(tmp_path, "Topic/README.md", make_readme("My Topic"))
    write(tmp_path, "Topic/Sub-Note.md", make_note("Sub Note", extra="tree_title: Sub\n"))
    write(tmp_path, "Topic/_img/Sub-Note/Diagram.PNG", "png-bytes")
    write(tmp_path, "node_modules/pkg/readme.md", "ignored")
    write(tmp_path, ".git/HEAD", "ref: refs/heads/main\n")
    write(tmp_path, "_website/docs-static/about/about.md", "# About\n")
    return tmp_path

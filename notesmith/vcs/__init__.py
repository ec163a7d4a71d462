"""Git access for the check pipeline."""

from notesmith.vcs.git import GitClient

__all__ = ["GitClient"]

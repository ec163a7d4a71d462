"""notesmith: pre-commit checks and site generation for a markdown notes repository."""

from notesmith.errors import GitError, NotesmithError, NoteValidationError

__version__ = "0.1.0"

__all__ = ["GitError", "NotesmithError", "NoteValidationError", "__version__"]

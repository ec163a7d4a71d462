from .loader import load_config
from .models import (
    GitConfig,
    NotesConfig,
    NotesmithConfig,
    WebsiteConfig,
)

__all__ = [
    "GitConfig",
    "NotesConfig",
    "NotesmithConfig",
    "WebsiteConfig",
    "load_config",
]

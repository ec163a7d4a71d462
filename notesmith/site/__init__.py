"""Website generation: docs, relocated images and the sidebar manifest."""

from notesmith.site.builder import SiteBuilder
from notesmith.site.images import ImageRelocator
from notesmith.site.models import BuildReport
from notesmith.site.sidebar import SidebarBuilder, doc_id

__all__ = [
    "BuildReport",
    "ImageRelocator",
    "SidebarBuilder",
    "SiteBuilder",
    "doc_id",
]

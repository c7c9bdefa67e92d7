"""Page catalog: page descriptors from the index, matched by localized URL.

Conventions::

    data/pages/
      db.json            # page index: name -> {"name", "url", ...}
      en/
        home.json        # per-locale page data (optional)
      de/
        home.json
"""

from linnet.pages.catalog import PageCatalog
from linnet.pages.types import PageDescriptor

__all__ = [
    "PageCatalog",
    "PageDescriptor",
]

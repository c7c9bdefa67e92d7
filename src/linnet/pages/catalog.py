"""Page catalog — every page the site knows, matched by URL.

The index (``data/pages/db.json``) is read once at startup::

    {
        "home": {"name": "home", "url": "/"},
        "about": {"name": "about", "url": "/about", "menu": true}
    }

Fields other than ``name`` and ``url`` become the page's base data.
Per-locale fields live in ``data/pages/<locale>/<name>.json`` and are
layered onto per-request clones, never onto the catalog itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from linnet.errors import ConfigurationError, NotFound
from linnet.i18n.locales import LocaleRegistry
from linnet.pages.types import PageDescriptor
from linnet.sources import read_json

logger = logging.getLogger("linnet.pages")

_RESERVED_FIELDS = frozenset({"name", "url"})


class PageCatalog(Mapping[str, PageDescriptor]):
    """Immutable, ordered mapping of page name to base :class:`PageDescriptor`.

    Matching follows index order; the first exact URL match wins.
    """

    __slots__ = ("_data_dir", "_locales", "_pages")

    def __init__(
        self,
        pages: Mapping[str, PageDescriptor],
        locales: LocaleRegistry,
        data_dir: str | Path,
    ) -> None:
        self._pages: Mapping[str, PageDescriptor] = MappingProxyType(dict(pages))
        self._locales = locales
        self._data_dir = Path(data_dir)

    @classmethod
    def load(
        cls,
        index_file: str | Path,
        data_dir: str | Path,
        locales: LocaleRegistry,
    ) -> PageCatalog:
        """Read the page index.

        Args:
            index_file: Path to the page index JSON.
            data_dir: Directory holding ``<locale>/<name>.json`` page data.
            locales: The site's locale registry.

        Raises:
            ConfigurationError: If the index is not an object or an entry
                lacks a ``url``.
        """
        data = read_json(index_file)
        if not isinstance(data, Mapping):
            msg = f"Page index {index_file} must contain a JSON object"
            raise ConfigurationError(msg)

        pages: dict[str, PageDescriptor] = {}
        for key, entry in data.items():
            if not isinstance(entry, Mapping) or "url" not in entry:
                msg = f"Page {key!r} in {index_file} needs an object with a 'url'"
                raise ConfigurationError(msg)
            name = str(entry.get("name") or key)
            extra = {k: v for k, v in entry.items() if k not in _RESERVED_FIELDS}
            pages[name] = PageDescriptor(name=name, url=str(entry["url"]), data=extra)

        logger.debug("Loaded %d pages from %s", len(pages), index_file)
        return cls(pages, locales, data_dir)

    # -- Mapping protocol --

    def __getitem__(self, name: str) -> PageDescriptor:
        return self._pages[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    # -- Lookup --

    def find_by_path(self, path: str, locale: str) -> PageDescriptor:
        """Return the page whose URL, localized for *locale*, equals *path*.

        *path* is the full request path as the visitor sees it
        (``"/de/about"`` for German, ``"/about"`` for the default locale).

        Raises:
            NotFound: If no page matches exactly.
        """
        for page in self._pages.values():
            if self._locales.build_url(page.url, locale) == path:
                return page
        raise NotFound(f"Page not found: {path}")

    def load_page_data(self, name: str, locale: str) -> dict[str, Any]:
        """Read a page's per-locale JSON. Missing files yield an empty dict."""
        data = read_json(self._data_dir / locale / f"{name}.json", missing_ok=True)
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            logger.debug("Ignoring non-object page data for %s/%s", locale, name)
            return {}
        return dict(data)

    def localize(self, locale: str) -> dict[str, PageDescriptor]:
        """Clone every page for *locale* with its data and localized URL.

        Eager pass over the whole catalog; base descriptors are untouched.
        """
        return {
            name: page.localize(
                self._locales.build_url(page.url, locale),
                self.load_page_data(name, locale),
            )
            for name, page in self._pages.items()
        }

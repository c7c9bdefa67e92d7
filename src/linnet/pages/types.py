"""Data models for the page catalog.

Immutable frozen dataclasses. The catalog holds one base descriptor per
page, built once at startup; each request works on localized clones so
page data loaded for one request is never visible to another.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from linnet._internal.merge import copy_json


def _frozen(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """A page known to the site.

    Unknown attribute lookups fall back to ``data``, so templates can
    write ``page.title`` for a ``title`` key in the page's JSON.

    Attributes:
        name: Page name, also the stem of its data and template files.
        url: Canonical, locale-agnostic URL (``"/about"``).
        localized_url: ``url`` rewritten for the active locale. Equals
            ``url`` on base descriptors held by the catalog.
        data: Read-only page fields from the index and per-locale JSON.
    """

    name: str
    url: str
    localized_url: str = ""
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not self.localized_url:
            object.__setattr__(self, "localized_url", self.url)
        if not isinstance(self.data, MappingProxyType):
            object.__setattr__(self, "data", _frozen(self.data))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name == "data":
            raise AttributeError(name)
        try:
            return self.data[name]
        except KeyError:
            msg = f"{type(self).__name__!r} object has no attribute {name!r}"
            raise AttributeError(msg) from None

    def localize(self, localized_url: str, data: Mapping[str, Any] | None = None) -> PageDescriptor:
        """Return a per-request clone with *data* layered over the base data.

        Top-level keys of *data* replace base keys. Nested values are
        copied, so changes to the clone never reach the catalog.
        """
        merged = {**copy_json(self.data), **copy_json(data or {})}
        return PageDescriptor(name=self.name, url=self.url, localized_url=localized_url, data=merged)

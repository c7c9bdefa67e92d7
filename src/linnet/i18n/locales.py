"""Locale registry — the supported languages and their URL prefixes.

Loaded once from ``data/locales/db.json``::

    {
        "en": {"url": "/", "title": "English"},
        "de": {"url": "/de/", "title": "Deutsch"}
    }

Exactly one locale owns the ``/`` prefix; it is the default locale and
its pages carry no prefix in their URLs.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

from linnet.errors import ConfigurationError
from linnet.sources import read_json


@dataclass(frozen=True, slots=True)
class Locale:
    """A supported locale.

    Attributes:
        code: Two-letter language code, also the URL segment (``"de"``).
        url: URL prefix. ``"/"`` marks the default locale.
        title: Human-readable name for language switchers.
    """

    code: str
    url: str
    title: str = ""

    @property
    def is_default(self) -> bool:
        return self.url == "/"


def build_url(path: str, locale: str | None, default: str | None) -> str:
    """Rewrite *path* for *locale*.

    The default locale (and ``None``) leave the path untouched; any other
    locale gets a ``/<code>/`` prefix. Not idempotent: prefixing an already
    prefixed path prefixes it again.
    """
    if locale is None or locale == default:
        return path
    return "/" + locale + "/" + path.lstrip("/")


class LocaleRegistry(Mapping[str, Locale]):
    """Immutable, ordered mapping of locale code to :class:`Locale`.

    Iteration follows declaration order in the source file.
    """

    __slots__ = ("_default", "_locales")

    def __init__(self, locales: Mapping[str, Locale]) -> None:
        defaults = [code for code, item in locales.items() if item.is_default]
        if len(defaults) != 1:
            msg = (
                "Exactly one locale must use the '/' url prefix, "
                f"found {len(defaults)}: {sorted(defaults)}"
            )
            raise ConfigurationError(msg)
        self._locales: Mapping[str, Locale] = MappingProxyType(dict(locales))
        self._default: str = defaults[0]

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> LocaleRegistry:
        """Build a registry from decoded ``db.json`` content."""
        locales: dict[str, Locale] = {}
        for key, entry in data.items():
            if not isinstance(entry, Mapping):
                msg = f"Locale {key!r} must be an object, got {type(entry).__name__}"
                raise ConfigurationError(msg)
            code = str(entry.get("name") or key)
            if "url" not in entry:
                msg = f"Locale {code!r} has no 'url'"
                raise ConfigurationError(msg)
            locales[code] = Locale(code=code, url=str(entry["url"]), title=str(entry.get("title", "")))
        return cls(locales)

    @classmethod
    def from_file(cls, path: str | Path) -> LocaleRegistry:
        data = read_json(path)
        if not isinstance(data, Mapping):
            msg = f"Locale registry {path} must contain a JSON object"
            raise ConfigurationError(msg)
        return cls.from_data(data)

    # -- Mapping protocol --

    def __getitem__(self, code: str) -> Locale:
        return self._locales[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleRegistry({list(self._locales)!r}, default={self._default!r})"

    # -- Queries --

    @property
    def default(self) -> str:
        """Code of the locale owning the ``/`` prefix."""
        return self._default

    def build_url(self, path: str, locale: str | None = None) -> str:
        """Rewrite *path* for *locale* (see :func:`build_url`)."""
        return build_url(path, locale, self._default)

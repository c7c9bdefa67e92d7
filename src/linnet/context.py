"""Per-request render context.

A :class:`RenderContext` is built once per request by ``Site.resolve()``
and handed to the template layer. It is never cached or shared between
requests.

The merged content cascade is kept in ``extra`` rather than injected as
attributes. :meth:`RenderContext.as_template_context` flattens it into the
template namespace *after* the reserved fields, so a cascade key named
``page`` (or any other reserved name) overwrites that field for the
template::

    ctx.page.name                       # "about" — typed field, untouched
    ctx.as_template_context()["page"]   # cascade value if "page" collides
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from linnet.pages.types import PageDescriptor

# Template names owned by the context itself
RESERVED_FIELDS = ("locale", "default_locale", "locales", "uri", "page", "pages", "config")


@dataclass(frozen=True, slots=True)
class LocaleView:
    """How one locale appears on the current request.

    Attributes:
        url: The current request path rewritten for this locale.
        title: The locale's display title.
    """

    url: str
    title: str


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Everything the template layer needs to render one page.

    Attributes:
        locale: Active locale code.
        default_locale: The registry's default locale code.
        locales: Per-locale views for a language switcher, in registry order.
        uri: Request path without the locale segment.
        page: The matched page, localized for ``locale``.
        pages: Every page, localized for ``locale``, in index order.
        config: Environment (``.ini``) settings.
        extra: Merged content cascade (global, locale, page JSON).
    """

    locale: str
    default_locale: str
    locales: Mapping[str, LocaleView]
    uri: str
    page: PageDescriptor
    pages: Mapping[str, PageDescriptor]
    config: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def collisions(self) -> tuple[str, ...]:
        """Reserved field names that a cascade key overwrites in templates."""
        return tuple(name for name in RESERVED_FIELDS if name in self.extra)

    def as_template_context(self) -> dict[str, Any]:
        """Flat template namespace: reserved fields, then cascade keys."""
        namespace: dict[str, Any] = {
            "locale": self.locale,
            "default_locale": self.default_locale,
            "locales": self.locales,
            "uri": self.uri,
            "page": self.page,
            "pages": self.pages,
            "config": self.config,
        }
        namespace.update(self.extra)
        return namespace

    def __getitem__(self, key: str) -> Any:
        if key in self.extra:
            return self.extra[key]
        if key in RESERVED_FIELDS:
            return getattr(self, key)
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self.extra or key in RESERVED_FIELDS

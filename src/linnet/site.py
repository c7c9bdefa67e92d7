"""Linnet site class.

Loads the state shared across requests once (environment config, locale
registry, page catalog) and resolves individual requests
into a :class:`~linnet.context.RenderContext`.

Each request moves through::

    init -> locale_resolving -> redirecting                  (terminal)
                             -> page_matching -> not_found    (terminal, raises)
                                              -> config_loading -> ready

Thread safety:
    Shared state is frozen after ``__init__``. ``resolve()`` builds fresh
    page clones and a fresh context for every call and stores nothing on
    the site, so concurrent requests never observe each other's data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from linnet.assets import AssetKind, AssetSpec, resolve_assets
from linnet.config import EnvironmentConfig, EnvironmentMode, SiteConfig
from linnet.context import LocaleView, RenderContext
from linnet.errors import NotFound
from linnet.i18n.locales import LocaleRegistry
from linnet.i18n.resolver import resolve_locale
from linnet.pages.catalog import PageCatalog
from linnet.store import ConfigStore

logger = logging.getLogger("linnet.site")


class RequestState(StrEnum):
    """States of a single request's resolution."""

    INIT = "init"
    LOCALE_RESOLVING = "locale_resolving"
    REDIRECTING = "redirecting"
    PAGE_MATCHING = "page_matching"
    CONFIG_LOADING = "config_loading"
    READY = "ready"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Ready:
    """Terminal state: the page resolved and the context is complete."""

    context: RenderContext

    @property
    def state(self) -> RequestState:
        return RequestState.READY


@dataclass(frozen=True, slots=True)
class Redirecting:
    """Terminal state: the browser language picked a locale.

    The caller decides how to stop — an HTTP redirect in server mode,
    a silent halt in CLI mode. No page was resolved.
    """

    url: str
    locale: str

    @property
    def state(self) -> RequestState:
        return RequestState.REDIRECTING


Outcome = Ready | Redirecting


class Site:
    """A localized static site rooted at ``config.root_dir``.

    Usage::

        site = Site(SiteConfig(root_dir="./site"))
        outcome = site.resolve("/de/about", cookie_locale="de")
        if isinstance(outcome, Ready):
            render(site.template_name(outcome.context), outcome.context)
    """

    __slots__ = ("_store", "catalog", "config", "environment", "locales")

    def __init__(
        self,
        config: SiteConfig | None = None,
        *,
        environment: EnvironmentConfig | None = None,
    ) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self._store = ConfigStore(self.config)

        # Derived once per process; never changes afterwards
        self.environment: EnvironmentConfig = environment or self._store.load_environment()

        data_dir = self._store.data_dir
        self.locales: LocaleRegistry = LocaleRegistry.from_file(data_dir / "locales" / "db.json")
        self.catalog: PageCatalog = PageCatalog.load(
            data_dir / "pages" / "db.json",
            data_dir / "pages",
            self.locales,
        )
        logger.debug(
            "Site %s loaded: %d locales, %d pages, %s mode",
            self.config.root,
            len(self.locales),
            len(self.catalog),
            self.mode,
        )

    # -- Shared state --

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def mode(self) -> EnvironmentMode:
        return self.environment.mode

    @property
    def dev_dir(self) -> Path:
        return self.config.path(self.config.public_dir) / EnvironmentMode.DEV.value

    @property
    def public_dir(self) -> Path:
        """Output directory for the current environment mode."""
        return self.config.path(self.config.public_dir) / self.mode.value

    def url(self, path: str, locale: str | None = None) -> str:
        """Rewrite *path* for *locale* (no prefix for the default locale)."""
        return self.locales.build_url(path, locale)

    # -- Request resolution --

    def resolve(
        self,
        path: str = "/",
        *,
        cookie_locale: str | None = None,
        accept_language: str | None = None,
    ) -> Outcome:
        """Resolve a request path into a render context or a redirect.

        Args:
            path: Raw request path; the leading slash is optional.
            cookie_locale: Value of the locale cookie, if any.
            accept_language: Raw ``Accept-Language`` header, if any.

        Returns:
            :class:`Ready` with the context, or :class:`Redirecting` when the
            browser language chose the locale.

        Raises:
            NotFound: If no page matches the path for the active locale.
        """
        self._enter(RequestState.INIT, path)

        self._enter(RequestState.LOCALE_RESOLVING, path)
        resolution = resolve_locale(path, cookie_locale, accept_language, self.locales)
        if resolution.redirect and resolution.redirect_url is not None:
            self._enter(RequestState.REDIRECTING, resolution.redirect_url)
            return Redirecting(url=resolution.redirect_url, locale=resolution.locale)

        locale = resolution.locale
        request_path = self.locales.build_url(resolution.path, locale)

        self._enter(RequestState.PAGE_MATCHING, request_path)
        try:
            page = self.catalog.find_by_path(request_path, locale)
        except NotFound:
            self._enter(RequestState.NOT_FOUND, request_path)
            raise

        self._enter(RequestState.CONFIG_LOADING, page.name)
        pages = self.catalog.localize(locale)
        extra = self._store.load_cascade(locale, page.name)

        context = RenderContext(
            locale=locale,
            default_locale=self.locales.default,
            locales=MappingProxyType(self._locale_views(resolution.path)),
            uri=resolution.path,
            page=pages[page.name],
            pages=MappingProxyType(pages),
            config=self.environment.values,
            extra=MappingProxyType(extra),
        )
        if context.collisions:
            logger.debug("Cascade keys shadow context fields: %s", ", ".join(context.collisions))

        self._enter(RequestState.READY, page.name)
        return Ready(context)

    def template_name(self, context: RenderContext) -> str:
        """Template for the context's page: ``pages/<locale>/<name>.html``."""
        return f"pages/{context.locale}/{context.page.name}.html"

    # -- Assets --

    def manifest(self) -> Mapping[str, Any]:
        """The asset manifest; a missing file declares no assets."""
        data = self._store.read_json(self.config.compile_manifest, missing_ok=True)
        return data if isinstance(data, Mapping) else {}

    def assets(self, kind: AssetKind, mode: EnvironmentMode | None = None) -> list[AssetSpec]:
        return resolve_assets(
            kind,
            self.manifest(),
            mode or self.mode,
            self.config.path(self.config.packages_dir),
            self.config.packages_url,
        )

    def styles(self, mode: EnvironmentMode | None = None) -> list[AssetSpec]:
        return self.assets(AssetKind.STYLE, mode)

    def scripts(self, mode: EnvironmentMode | None = None) -> list[AssetSpec]:
        return self.assets(AssetKind.SCRIPT, mode)

    # -- Internals --

    def _locale_views(self, path: str) -> dict[str, LocaleView]:
        return {
            code: LocaleView(url=self.locales.build_url(path, code), title=item.title)
            for code, item in self.locales.items()
        }

    @staticmethod
    def _enter(state: RequestState, subject: str) -> None:
        logger.debug("%s %s", state, subject)

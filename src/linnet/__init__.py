"""Linnet — locale-aware page resolution for static sites.

Resolves a request path to a localized page: picks the locale from the
URL, the locale cookie, or the browser language; matches the page by its
localized URL; merges the global, locale, and page JSON cascade; and
resolves the style/script manifest for dev or live mode.

Basic usage::

    from linnet import Ready, Site, SiteConfig

    site = Site(SiteConfig(root_dir="./site"))
    outcome = site.resolve("/de/about")
    if isinstance(outcome, Ready):
        print(outcome.context.page.title)

Serving over HTTP::

    from linnet.server.handler import handle_request
    from linnet.templating.integration import create_environment

    env = create_environment(site)
    response = handle_request(site, "/about", {"Accept-Language": "de"}, env=env)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "AssetKind",
    "AssetSpec",
    "ConfigurationError",
    "EnvironmentConfig",
    "EnvironmentMode",
    "ExecutionMode",
    "HTTPError",
    "LinnetError",
    "Locale",
    "LocaleRegistry",
    "LocaleView",
    "MissingAssetDependency",
    "NotFound",
    "PageCatalog",
    "PageDescriptor",
    "Ready",
    "Redirecting",
    "RenderContext",
    "Response",
    "Site",
    "SiteConfig",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AssetKind": "linnet.assets",
    "AssetSpec": "linnet.assets",
    "ConfigurationError": "linnet.errors",
    "EnvironmentConfig": "linnet.config",
    "EnvironmentMode": "linnet.config",
    "ExecutionMode": "linnet.config",
    "HTTPError": "linnet.errors",
    "LinnetError": "linnet.errors",
    "Locale": "linnet.i18n.locales",
    "LocaleRegistry": "linnet.i18n.locales",
    "LocaleView": "linnet.context",
    "MissingAssetDependency": "linnet.errors",
    "NotFound": "linnet.errors",
    "PageCatalog": "linnet.pages.catalog",
    "PageDescriptor": "linnet.pages.types",
    "Ready": "linnet.site",
    "Redirecting": "linnet.site",
    "RenderContext": "linnet.context",
    "Response": "linnet.http.response",
    "Site": "linnet.site",
    "SiteConfig": "linnet.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import linnet`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)

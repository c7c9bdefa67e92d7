"""Locale registry and per-request locale detection."""

from linnet.i18n.locales import Locale, LocaleRegistry, build_url
from linnet.i18n.resolver import LocaleResolution, LocaleSource, resolve_locale

__all__ = [
    "Locale",
    "LocaleRegistry",
    "LocaleResolution",
    "LocaleSource",
    "build_url",
    "resolve_locale",
]

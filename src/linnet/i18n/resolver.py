"""Active-locale detection for a request.

Strict precedence, first match wins:

1. Locale code in the first URL segment (the segment is consumed)
2. ``locale`` cookie naming a known locale
3. ``Accept-Language`` header — only when neither of the above is present;
   a match here asks the caller to redirect to the locale-prefixed URL
4. The registry's default locale

Malformed headers never raise; they fall through to the default. A cookie
naming an unknown locale still counts as present, so it suppresses header
detection and the default locale applies.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlsplit

from linnet.i18n.locales import LocaleRegistry


class LocaleSource(StrEnum):
    """Which step of the precedence chain chose the locale."""

    URL = "url"
    COOKIE = "cookie"
    HEADER = "header"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class LocaleResolution:
    """Outcome of locale detection.

    Attributes:
        locale: The active locale code.
        path: Request path with the locale segment removed (``"/about"``).
        source: The precedence step that decided.
        redirect: True when the header picked the locale; the caller must
            redirect to ``redirect_url`` instead of resolving a page.
        redirect_url: Locale-prefixed URL, set only when ``redirect`` is True.
            Keeps the query string of the request.
    """

    locale: str
    path: str
    source: LocaleSource
    redirect: bool = False
    redirect_url: str | None = None


def split_path(path: str) -> list[str]:
    """Split a raw request path into non-empty segments.

    Query strings and fragments are dropped; a missing leading slash is
    tolerated.
    """
    raw = urlsplit(path).path if ("?" in path or "#" in path) else path
    return [segment for segment in raw.split("/") if segment]


def join_path(segments: Sequence[str]) -> str:
    return "/" + "/".join(segments)


def accept_language_tokens(header: str | None) -> Iterator[str]:
    """Yield candidate two-letter codes from an ``Accept-Language`` value.

    The header is split on ``;`` and then on ``,``. Only tokens exactly two
    characters long are yielded, lower-cased, in header order. Quality
    weights are not interpreted: ``"fr-FR,fr;q=0.9,en;q=0.8"`` yields
    ``"fr"`` then ``"en"``.
    """
    if not header:
        return
    for group in header.split(";"):
        for token in group.split(","):
            token = token.strip()
            if len(token) == 2:
                yield token.lower()


def resolve_locale(
    path: str | Sequence[str],
    cookie_locale: str | None,
    accept_language: str | None,
    registry: LocaleRegistry,
) -> LocaleResolution:
    """Determine the active locale for a request.

    Args:
        path: Raw request path or its pre-split segments.
        cookie_locale: Value of the locale cookie, if any.
        accept_language: Raw ``Accept-Language`` header, if any.
        registry: Known locales.

    Returns:
        A :class:`LocaleResolution`. When ``redirect`` is set the caller
        must stop and redirect; no page resolution should follow.
    """
    if isinstance(path, str):
        segments = split_path(path)
        query = urlsplit(path).query
    else:
        segments = [s for s in path if s]
        query = ""

    if segments and segments[0] in registry:
        return LocaleResolution(
            locale=segments[0],
            path=join_path(segments[1:]),
            source=LocaleSource.URL,
        )

    remaining = join_path(segments)

    if cookie_locale and cookie_locale in registry:
        return LocaleResolution(locale=cookie_locale, path=remaining, source=LocaleSource.COOKIE)

    if not cookie_locale:
        for code in accept_language_tokens(accept_language):
            if code in registry:
                return LocaleResolution(
                    locale=code,
                    path=remaining,
                    source=LocaleSource.HEADER,
                    redirect=True,
                    redirect_url=_with_query(registry.build_url(remaining, code), query),
                )

    return LocaleResolution(locale=registry.default, path=remaining, source=LocaleSource.DEFAULT)


def _with_query(url: str, query: str) -> str:
    return f"{url}?{query}" if query else url

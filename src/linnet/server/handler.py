"""Request handler — turns a site resolution into a Response.

The only component that knows about HTTP. Reads the locale cookie and
``Accept-Language`` from the request headers, runs ``Site.resolve()``,
and maps the outcome:

- ``Redirecting`` -> 302 with ``Location`` (no cookie)
- ``NotFound``    -> 404 with the error detail
- ``Ready``       -> rendered page plus the ``locale`` cookie

In CLI execution mode a redirect halts with an empty 204 and no
``Location``, and pages are returned without the cookie.
"""

import logging

from kida import Environment

from linnet._internal.types import HeaderMap
from linnet.config import ExecutionMode
from linnet.errors import HTTPError
from linnet.http.cookies import SetCookie, parse_cookies
from linnet.http.response import Response
from linnet.site import Redirecting, Site
from linnet.templating.integration import render_page

logger = logging.getLogger("linnet.server")


def handle_request(
    site: Site,
    path: str,
    headers: HeaderMap,
    *,
    env: Environment,
) -> Response:
    """Resolve and render one request.

    Args:
        site: The site to resolve against.
        path: Raw request path.
        headers: Request headers; names are matched case-insensitively.
        env: Kida environment from ``create_environment(site)``.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    cookies = parse_cookies(lowered.get("cookie"))

    try:
        outcome = site.resolve(
            path,
            cookie_locale=cookies.get(site.config.locale_cookie) or None,
            accept_language=lowered.get("accept-language"),
        )
    except HTTPError as exc:
        logger.debug("%d %s: %s", exc.status, path, exc.detail)
        response = Response(body=exc.detail or str(exc.status), status=exc.status)
        for name, value in exc.headers:
            response = response.with_header(name, value)
        return response

    serving = site.config.execution_mode is ExecutionMode.SERVER

    if isinstance(outcome, Redirecting):
        if not serving:
            logger.info("Redirect to %s halted (CLI mode)", outcome.url)
            return Response(status=204)
        logger.debug("302 %s -> %s", path, outcome.url)
        return Response.redirect(outcome.url)

    context = outcome.context
    response = Response(body=render_page(env, site, context))
    if serving:
        response = response.with_cookie(locale_cookie(site, context.locale))
    return response


def locale_cookie(site: Site, locale: str) -> SetCookie:
    """The cookie that remembers *locale* for a year across the whole site."""
    return SetCookie(
        name=site.config.locale_cookie,
        value=locale,
        max_age=site.config.locale_cookie_max_age,
        path="/",
    )

"""The response handed back to the surrounding server.

A page, a 404 body, or a bare redirect. Headers and cookies are added
with `.with_*()` calls that each return a new Response.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from linnet.http.cookies import SetCookie


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status, headers, and cookies. Each call returns a new ``Response``.
    """

    body: str = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
    cookies: tuple[SetCookie, ...] = ()

    @classmethod
    def redirect(cls, url: str, status: int = 302) -> Response:
        """A bodiless redirect to *url*."""
        return cls(status=status).with_header("Location", url)

    # -- Chainable transformations --

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_cookie(self, cookie: SetCookie) -> Response:
        """Return a new Response with an additional Set-Cookie."""
        return replace(self, cookies=(*self.cookies, cookie))

    # -- Accessors --

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

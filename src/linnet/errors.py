"""Linnet exception hierarchy.

Shared across the locale resolver, page catalog, asset resolver, and the
request handler so every module raises and catches the same types.
"""

from dataclasses import dataclass


class LinnetError(Exception):
    """Base for all linnet-specific errors."""


class ConfigurationError(LinnetError):
    """Raised when site files are invalid.

    Typically raised while a ``Site`` loads its locale registry, page
    index, or environment config at startup.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(LinnetError):
    """An error that maps directly to an HTTP status code.

    Raised during request resolution. The request handler catches these
    and turns them into a plain response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no page matched the request path."""

    def __init__(self, detail: str = "Page not found") -> None:
        super().__init__(status=404, detail=detail)


class MissingAssetDependency(LinnetError):
    """A ``~package`` asset reference could not be resolved.

    Raised when the package has no ``package.json`` or the manifest lacks
    the entry field the asset kind needs. Aborts the whole asset list.
    """

    def __init__(self, package: str, field: str | None = None) -> None:
        self.package = package
        self.field = field
        if field is None:
            msg = f"Package {package!r} not found"
        else:
            msg = f"Package {package!r} defines no {field!r} entry"
        super().__init__(msg)

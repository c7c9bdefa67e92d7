"""The locale cookie on the wire.

Requests carry it inside the ``Cookie`` header; responses set it with a
single ``Set-Cookie`` line that lives for a year across the whole site.
"""

from dataclasses import dataclass


def parse_cookies(header: str | None) -> dict[str, str]:
    """Map cookie names to values from a ``Cookie`` header.

    Fragments without ``=`` are skipped; a repeated name keeps its last
    value.
    """
    found: dict[str, str] = {}
    for fragment in (header or "").split(";"):
        name, sep, value = fragment.partition("=")
        if sep:
            found[name.strip()] = value.strip()
    return found


@dataclass(frozen=True, slots=True)
class SetCookie:
    """One ``Set-Cookie`` line.

    Attributes:
        name: Cookie name (``"locale"``).
        value: Cookie value, a locale code.
        max_age: Lifetime in seconds; ``None`` makes a session cookie.
        path: Scope of the cookie; ``/`` covers every locale prefix.
    """

    name: str
    value: str
    max_age: int | None = None
    path: str = "/"

    def to_header_value(self) -> str:
        attributes = [f"{self.name}={self.value}"]
        if self.max_age is not None:
            attributes.append(f"Max-Age={self.max_age}")
        attributes.append(f"Path={self.path}")
        return "; ".join(attributes)

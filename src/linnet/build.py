"""Static build — render every page in every locale to the public directory.

Output paths follow the localized page URL inside ``site.public_dir``
(``public/dev`` or ``public/live``)::

    /            -> index.html
    /de/about    -> de/about/index.html
    /feed.xml    -> feed.xml
"""

import logging
from pathlib import Path, PurePosixPath

from kida import Environment

from linnet.site import Ready, Site
from linnet.templating.integration import render_page

logger = logging.getLogger("linnet.build")


def output_path(url: str) -> PurePosixPath:
    """Relative output file for a localized page URL."""
    relative = PurePosixPath(url.strip("/"))
    if not relative.parts:
        return PurePosixPath("index.html")
    if relative.suffix:
        return relative
    return relative / "index.html"


def build_site(site: Site, env: Environment, out_dir: str | Path | None = None) -> list[Path]:
    """Render all (locale, page) pairs and write them under *out_dir*.

    Each page is resolved through its locale-prefixed URL so the build sees
    exactly what a visitor would. Defaults to ``site.public_dir``.

    Returns:
        The written files, in locale then page-index order.
    """
    root = Path(out_dir) if out_dir is not None else site.public_dir
    written: list[Path] = []
    for locale in site.locales:
        prefixed = "/" + locale
        for page in site.catalog.values():
            outcome = site.resolve(prefixed + "/" + page.url.lstrip("/"))
            if not isinstance(outcome, Ready):
                continue
            context = outcome.context
            target = root / output_path(context.page.localized_url)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render_page(env, site, context), encoding="utf-8")
            logger.info("Wrote %s", target)
            written.append(target)
    return written

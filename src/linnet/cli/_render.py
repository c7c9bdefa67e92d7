"""``linnet render`` — resolve one path and print the rendered page.

A browser-language redirect halts the command with status 0 and no
output; an unknown page exits with status 1.
"""

import argparse
import logging
import sys

from linnet.cli._resolve import load_site
from linnet.errors import LinnetError, NotFound
from linnet.site import Redirecting
from linnet.templating.integration import create_environment, render_page

logger = logging.getLogger("linnet.cli")


def run_render(args: argparse.Namespace) -> None:
    site = load_site(args)
    try:
        outcome = site.resolve(
            args.path,
            cookie_locale=args.cookie,
            accept_language=args.accept_language,
        )
    except NotFound as exc:
        print(f"Error: {exc.detail}", file=sys.stderr)
        raise SystemExit(1) from exc

    if isinstance(outcome, Redirecting):
        logger.info("Redirect to %s halted (CLI mode)", outcome.url)
        raise SystemExit(0)

    try:
        html = render_page(create_environment(site), site, outcome.context)
    except LinnetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    sys.stdout.write(html)

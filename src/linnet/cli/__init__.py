"""Linnet CLI — render, inspect, and build a localized static site.

Entry point registered as ``linnet`` in ``pyproject.toml``::

    [project.scripts]
    linnet = "linnet.cli:main"

Commands run in the CLI execution mode: a browser-language redirect
halts silently and no locale cookie is set.
"""

import argparse
import logging
import sys


def _add_root(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", default=".", help="Site root directory (default: .)")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``linnet`` command."""
    parser = argparse.ArgumentParser(
        prog="linnet",
        description="Linnet — locale-aware page resolution for static sites.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # -- linnet render ----------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render one request path to stdout")
    render_parser.add_argument("path", help="Request path (e.g. /de/about)")
    _add_root(render_parser)
    render_parser.add_argument("--cookie", default=None, help="Locale cookie value")
    render_parser.add_argument(
        "--accept-language",
        default=None,
        help="Accept-Language header value",
    )

    # -- linnet assets ----------------------------------------------------
    assets_parser = subparsers.add_parser("assets", help="Print resolved styles or scripts as JSON")
    assets_parser.add_argument("kind", choices=["styles", "scripts"])
    _add_root(assets_parser)
    assets_parser.add_argument(
        "--mode",
        choices=["dev", "live"],
        default=None,
        help="Override the environment mode",
    )

    # -- linnet pages -----------------------------------------------------
    pages_parser = subparsers.add_parser("pages", help="List pages and their localized URLs")
    _add_root(pages_parser)
    pages_parser.add_argument("--locale", default=None, help="Only this locale")

    # -- linnet build -----------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Render every page into the public directory")
    _add_root(build_parser)
    build_parser.add_argument("--out", default=None, help="Output directory (default: public/<mode>)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        from linnet.cli._render import run_render

        run_render(args)
    elif args.command == "assets":
        from linnet.cli._assets import run_assets

        run_assets(args)
    elif args.command == "pages":
        from linnet.cli._pages import run_pages

        run_pages(args)
    elif args.command == "build":
        from linnet.cli._build import run_build

        run_build(args)

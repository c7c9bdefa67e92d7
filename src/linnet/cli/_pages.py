"""``linnet pages`` — list pages with their URL in each locale."""

import argparse
import sys

from linnet.cli._resolve import load_site


def run_pages(args: argparse.Namespace) -> None:
    site = load_site(args)
    if args.locale is not None and args.locale not in site.locales:
        print(f"Error: unknown locale {args.locale!r}", file=sys.stderr)
        raise SystemExit(1)
    locales = [args.locale] if args.locale else list(site.locales)

    rows = [
        (locale, name, site.url(page.url, locale))
        for locale in locales
        for name, page in site.catalog.items()
    ]
    if not rows:
        print("No pages registered.")
        return

    width_locale = max(6, *(len(r[0]) for r in rows))
    width_name = max(4, *(len(r[1]) for r in rows))
    print(f"{'LOCALE':<{width_locale}}  {'PAGE':<{width_name}}  URL")
    for locale, name, url in rows:
        print(f"{locale:<{width_locale}}  {name:<{width_name}}  {url}")

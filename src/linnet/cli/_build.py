"""``linnet build`` — write every page in every locale to disk."""

import argparse
import sys

from linnet.build import build_site
from linnet.cli._resolve import load_site
from linnet.errors import LinnetError
from linnet.templating.integration import create_environment


def run_build(args: argparse.Namespace) -> None:
    site = load_site(args)
    try:
        written = build_site(site, create_environment(site), args.out)
    except LinnetError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(f"Built {len(written)} pages ({site.mode}) into {args.out or site.public_dir}")

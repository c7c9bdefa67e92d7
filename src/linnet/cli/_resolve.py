"""Site loading shared by every ``linnet`` command."""

import argparse
import sys

from linnet.config import ExecutionMode, SiteConfig
from linnet.errors import ConfigurationError
from linnet.site import Site


def load_site(args: argparse.Namespace) -> Site:
    """Build a CLI-mode Site rooted at ``args.root``.

    Exits with status 1 when the site files are missing or invalid.
    """
    config = SiteConfig(root_dir=args.root, execution_mode=ExecutionMode.CLI)
    try:
        return Site(config)
    except (FileNotFoundError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

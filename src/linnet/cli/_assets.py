"""``linnet assets`` — print the resolved style or script list as JSON."""

import argparse
import json
import sys
from dataclasses import asdict

from linnet.assets import AssetKind
from linnet.cli._resolve import load_site
from linnet.config import EnvironmentMode
from linnet.errors import MissingAssetDependency


def run_assets(args: argparse.Namespace) -> None:
    site = load_site(args)
    mode = EnvironmentMode(args.mode) if args.mode else None
    try:
        specs = site.assets(AssetKind(args.kind), mode)
    except MissingAssetDependency as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = []
    for spec in specs:
        row = asdict(spec)
        if spec.attributes is not None:
            row["attributes"] = dict(spec.attributes)
        rows.append(row)
    print(json.dumps(rows, indent=2))

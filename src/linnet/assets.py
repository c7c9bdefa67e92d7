"""Style and script manifests with dev/live source selection.

The asset manifest (``config/compile.json``) declares styles and scripts
keyed by id, in the order they should appear in the page::

    {
        "styles": {
            "normalize": "~normalize.css",
            "main": {"dev": "/css/main.css", "live": "/css/main.min.css"},
            "inline": "/css/critical.css"
        },
        "scripts": {
            "vendor": "~left-pad",
            "analytics": {"live": {"src": "/js/a.js", "async": true}}
        }
    }

- The id ``inline`` marks an asset to be inlined by the template.
- An object with ``dev``/``live`` keys selects the value for the mode.
- A scalar value is the ``src``; an object value becomes ``attributes``.
- ``~name`` sources point at a third-party package and resolve through
  ``<packages_dir>/<name>/package.json``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from linnet.config import EnvironmentMode
from linnet.errors import MissingAssetDependency
from linnet.sources import read_json

logger = logging.getLogger("linnet.assets")

# Asset id that marks an inline asset
INLINE_ID = "inline"

# Prefix marking a package reference
PACKAGE_PREFIX = "~"

SCRIPT_EXTENSION = ".js"
MINIFIED_SCRIPT_SUFFIX = ".min.js"


class AssetKind(StrEnum):
    """Manifest section; the value is the section's key in the manifest."""

    STYLE = "styles"
    SCRIPT = "scripts"


@dataclass(frozen=True, slots=True)
class AssetSpec:
    """One resolved manifest entry, ready for a ``<link>``/``<script>`` tag.

    Attributes:
        src: Resolved source URL; empty when the entry is attributes-only.
        inline: True for the entry declared under the ``inline`` id.
        attributes: Tag attributes when the entry value was an object.
        module: Package name when ``src`` came from a ``~package`` reference.
    """

    src: str = ""
    inline: bool = False
    attributes: Mapping[str, Any] | None = None
    module: str | None = None


def resolve_assets(
    kind: AssetKind,
    manifest: Mapping[str, Any],
    mode: EnvironmentMode,
    packages_dir: str | Path,
    packages_url: str = "/node_modules",
) -> list[AssetSpec]:
    """Resolve the *kind* section of *manifest* for *mode*.

    Order follows the manifest's declaration order. Entries whose
    ``dev``/``live`` object has no value for *mode* are skipped.

    Raises:
        MissingAssetDependency: If any ``~package`` reference cannot be
            resolved. No partial list is returned.
    """
    section = manifest.get(kind.value) or {}
    specs: list[AssetSpec] = []
    for asset_id, entry in section.items():
        value = _select_for_mode(entry, mode)
        if value is None:
            logger.debug("No %s source for %s %r", mode, kind, asset_id)
            continue

        src = ""
        attributes: Mapping[str, Any] | None = None
        if isinstance(value, Mapping):
            attributes = MappingProxyType(dict(value))
        elif isinstance(value, list):
            attributes = MappingProxyType({str(index): item for index, item in enumerate(value)})
        else:
            src = _scalar_to_str(value)

        module: str | None = None
        if src.startswith(PACKAGE_PREFIX):
            module = src.removeprefix(PACKAGE_PREFIX)
            src = package_entry_url(module, kind, packages_dir, packages_url)

        specs.append(
            AssetSpec(
                src=src,
                inline=asset_id == INLINE_ID,
                attributes=attributes,
                module=module,
            )
        )
    return specs


def package_entry_url(
    name: str,
    kind: AssetKind,
    packages_dir: str | Path,
    packages_url: str = "/node_modules",
) -> str:
    """Resolve a package to the URL of its style or script entry file.

    Styles use the last present of ``style`` and ``main`` (so ``main`` wins
    when both are declared). Scripts use ``main``, with ``.min.js``
    appended when it does not already end in ``.js``.

    Raises:
        MissingAssetDependency: If the package manifest is missing or lacks
            the needed field.
    """
    manifest = read_package_manifest(name, packages_dir)

    if kind is AssetKind.STYLE:
        rel = None
        for field in ("style", "main"):
            if manifest.get(field):
                rel = str(manifest[field])
        if not rel:
            raise MissingAssetDependency(name, "style")
    else:
        rel = str(manifest["main"]) if manifest.get("main") else None
        if not rel:
            raise MissingAssetDependency(name, "main")
        if not rel.endswith(SCRIPT_EXTENSION):
            rel += MINIFIED_SCRIPT_SUFFIX

    rel = rel.removeprefix("./").lstrip("/")
    return f"{packages_url.rstrip('/')}/{name}/{rel}"


def read_package_manifest(name: str, packages_dir: str | Path) -> Mapping[str, Any]:
    """Decode ``<packages_dir>/<name>/package.json``.

    Raises:
        MissingAssetDependency: If the manifest is missing or not an object.
    """
    data = read_json(Path(packages_dir) / name / "package.json", missing_ok=True)
    if not isinstance(data, Mapping):
        raise MissingAssetDependency(name)
    return data


def _select_for_mode(entry: Any, mode: EnvironmentMode) -> Any:
    if isinstance(entry, Mapping) and ("dev" in entry or "live" in entry):
        return entry.get(mode.value)
    return entry


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool | int | float):
        return json.dumps(value)
    return str(value)

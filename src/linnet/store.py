"""Layered configuration store.

Two cascades, both merged with :func:`~linnet._internal.merge.deep_merge`
(later layers override earlier ones key by key; lists and scalars are
replaced wholesale):

- **Environment** — every ``config/*.ini`` file in sorted order. Read once
  per process; decides the dev/live :class:`~linnet.config.EnvironmentMode`.
- **Content** — per request, from least to most specific::

      data/global.json
      data/<locale>/global.json
      data/<locale>/<page>.json

  Every file is optional. The merged result is flattened onto the render
  context (see :class:`~linnet.context.RenderContext`).
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from linnet._internal.merge import deep_merge, merge_layers
from linnet._internal.types import JSONObject
from linnet.config import EnvironmentConfig, SiteConfig
from linnet.sources import read_ini, read_json

logger = logging.getLogger("linnet.store")


class ConfigStore:
    """Reads the environment and content cascades for one site."""

    __slots__ = ("_config",)

    def __init__(self, config: SiteConfig) -> None:
        self._config = config

    @property
    def data_dir(self) -> Path:
        return self._config.path(self._config.data_dir)

    @property
    def config_dir(self) -> Path:
        return self._config.path(self._config.config_dir)

    def read_json(self, relative: str | Path, *, missing_ok: bool = False) -> Any:
        """Decode a JSON file relative to the site root."""
        return read_json(self._config.path(relative), missing_ok=missing_ok)

    # -- Environment --

    def load_environment(self) -> EnvironmentConfig:
        """Merge every ``.ini`` file in the config directory.

        Files are applied in sorted name order, so ``local.ini`` overrides
        ``app.ini``. A missing config directory yields dev mode with no
        values.
        """
        merged: JSONObject = {}
        if self.config_dir.is_dir():
            for file in sorted(self.config_dir.glob("*.ini")):
                merged = deep_merge(merged, read_ini(file))
        environment = EnvironmentConfig.from_values(merged)
        logger.debug("Environment mode: %s", environment.mode)
        return environment

    # -- Content cascade --

    def cascade_files(self, locale: str, page_name: str) -> list[Path]:
        """The cascade sources for (*locale*, *page_name*), least specific first."""
        root = self.data_dir
        return [
            root / "global.json",
            root / locale / "global.json",
            root / locale / f"{page_name}.json",
        ]

    def load_cascade(self, locale: str, page_name: str) -> JSONObject:
        """Merge the global, locale, and page JSON layers.

        Missing files and non-object payloads contribute nothing. The result
        is a plain JSON-compatible dict sharing no objects with the files'
        decoded content.
        """
        layers: list[Mapping[str, Any]] = []
        for file in self.cascade_files(locale, page_name):
            data = read_json(file, missing_ok=True)
            if isinstance(data, Mapping):
                layers.append(data)
            elif data is not None:
                logger.debug("Skipping non-object cascade layer %s", file)
        return merge_layers(layers)

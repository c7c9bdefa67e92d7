"""Site configuration.

SiteConfig names where a site keeps its files and is frozen after creation.
EnvironmentConfig holds the merged ``.ini`` values
and the dev/live mode derived from them once at startup.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from linnet._internal.merge import freeze

# ``env.mode`` values (case-insensitive) that switch the site to live mode
LIVE_MODE_ALIASES = frozenset({"live", "production", "release"})


class EnvironmentMode(StrEnum):
    """Process-wide asset mode: development sources or live (minified) ones."""

    DEV = "dev"
    LIVE = "live"

    @classmethod
    def from_value(cls, value: object) -> EnvironmentMode:
        """Derive the mode from a raw ``env.mode`` setting."""
        if isinstance(value, str) and value.strip().lower() in LIVE_MODE_ALIASES:
            return cls.LIVE
        return cls.DEV


class ExecutionMode(StrEnum):
    """How the site is being driven.

    ``server`` answers HTTP requests (redirects and cookies are real);
    ``cli`` renders from the command line, where a redirect simply halts.
    """

    SERVER = "server"
    CLI = "cli"


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site configuration. Immutable after creation.

    All fields have sensible defaults. Directory fields are relative to
    ``root_dir`` unless absolute::

        config = SiteConfig(root_dir="./site", template_dir="templates")
    """

    root_dir: str | Path = "."

    # Data sources
    data_dir: str | Path = "data"
    config_dir: str | Path = "config"
    compile_manifest: str | Path = "config/compile.json"

    # Templates
    template_dir: str | Path = "tpl"
    autoescape: bool = True

    # Output (one subdirectory per environment mode)
    public_dir: str | Path = "public"

    # Third-party packages referenced as ``~name`` in the asset manifest
    packages_dir: str | Path = "node_modules"
    packages_url: str = "/node_modules"

    # Locale cookie
    locale_cookie: str = "locale"
    locale_cookie_max_age: int = 86400 * 365

    execution_mode: ExecutionMode = ExecutionMode.SERVER

    @property
    def root(self) -> Path:
        return Path(self.root_dir).resolve()

    def path(self, relative: str | Path) -> Path:
        """Resolve a configured directory or file against ``root_dir``."""
        return self.root / relative


@dataclass(frozen=True, slots=True)
class EnvironmentConfig:
    """Merged environment settings plus the mode derived from ``env.mode``.

    Built once per process by ``ConfigStore.load_environment()``.
    """

    values: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    mode: EnvironmentMode = EnvironmentMode.DEV

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> EnvironmentConfig:
        env_section = values.get("env")
        raw_mode = env_section.get("mode") if isinstance(env_section, Mapping) else None
        return cls(values=freeze(values), mode=EnvironmentMode.from_value(raw_mode))

    @property
    def is_live(self) -> bool:
        return self.mode is EnvironmentMode.LIVE

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Return ``[section] key`` or *default* when either is missing."""
        entries = self.values.get(section)
        if not isinstance(entries, Mapping):
            return default
        return entries.get(key, default)

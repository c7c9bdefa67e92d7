"""Shared fixtures: a small three-locale site tree on disk."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from linnet.config import SiteConfig
from linnet.site import Site


def _write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    """Write *data* as JSON to *path*, creating parent directories."""
    return _write_json


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A site with en (default), de and fr locales and three pages.

    - ``contact`` has no per-locale page data anywhere
    - ``fr`` has no page data and no cascade files at all
    """
    root = tmp_path / "site"
    _write_json(
        root / "data" / "locales" / "db.json",
        {
            "en": {"name": "en", "url": "/", "title": "English"},
            "de": {"name": "de", "url": "/de/", "title": "Deutsch"},
            "fr": {"name": "fr", "url": "/fr/", "title": "Français"},
        },
    )
    _write_json(
        root / "data" / "pages" / "db.json",
        {
            "home": {"name": "home", "url": "/"},
            "about": {"name": "about", "url": "/about", "menu": True},
            "contact": {"name": "contact", "url": "/contact"},
        },
    )
    _write_json(root / "data" / "pages" / "en" / "home.json", {"title": "Home"})
    _write_json(root / "data" / "pages" / "de" / "home.json", {"title": "Startseite"})
    _write_json(root / "data" / "pages" / "en" / "about.json", {"title": "About us"})
    _write_json(root / "data" / "pages" / "de" / "about.json", {"title": "Über uns"})

    _write_json(root / "data" / "global.json", {"site": "Linnet", "nav": {"home": "/"}})
    _write_json(root / "data" / "de" / "global.json", {"nav": {"about": "/de/about"}})
    _write_json(root / "data" / "de" / "about.json", {"heading": "Wer wir sind"})
    _write_json(root / "data" / "en" / "about.json", {"heading": "Who we are"})

    config_dir = root / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "app.ini").write_text("[env]\nmode = dev\n", encoding="utf-8")
    return root


@pytest.fixture
def site(site_root: Path) -> Site:
    return Site(SiteConfig(root_dir=site_root))


@pytest.fixture
def templated_root(site_root: Path) -> Path:
    """``site_root`` plus a template for every (locale, page) pair."""
    for locale in ("en", "de", "fr"):
        for name in ("home", "about", "contact"):
            path = site_root / "tpl" / "pages" / locale / f"{name}.html"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                "<html lang=\"{{ locale }}\"><h1>{{ page.name }}</h1>"
                "<p>{{ site }}</p>"
                "{% for s in styles %}<link href=\"{{ s.src }}\">{% end %}"
                "</html>",
                encoding="utf-8",
            )
    return site_root


@pytest.fixture
def templated_site(templated_root: Path) -> Site:
    return Site(SiteConfig(root_dir=templated_root))

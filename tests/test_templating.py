"""Tests for linnet.templating — kida environment and page rendering."""

from pathlib import Path

import pytest
from kida import DictLoader

from linnet.errors import MissingAssetDependency
from linnet.site import Ready, Site
from linnet.templating.integration import create_environment, render_page


def _context(site: Site, path: str):
    outcome = site.resolve(path)
    assert isinstance(outcome, Ready)
    return outcome.context


class TestRenderPage:
    def test_filesystem_templates(self, templated_site: Site) -> None:
        env = create_environment(templated_site)
        html = render_page(env, templated_site, _context(templated_site, "/de/about"))
        assert '<html lang="de">' in html
        assert "<h1>about</h1>" in html
        assert "<p>Linnet</p>" in html

    def test_cascade_keys_are_top_level(self, site: Site) -> None:
        env = create_environment(
            site,
            loader=DictLoader({"pages/de/about.html": "{{ heading }}|{{ uri }}"}),
        )
        html = render_page(env, site, _context(site, "/de/about"))
        assert html == "Wer wir sind|/about"

    def test_cascade_shadows_reserved_name(self, site: Site, site_root: Path, write_json) -> None:
        write_json(site_root / "data" / "en" / "home.json", {"uri": "shadowed"})
        env = create_environment(site, loader=DictLoader({"pages/en/home.html": "{{ uri }}"}))
        assert render_page(env, site, _context(site, "/")) == "shadowed"

    def test_url_global(self, site: Site) -> None:
        env = create_environment(
            site,
            loader=DictLoader({"pages/en/home.html": "{{ url('/about', 'fr') }}"}),
        )
        assert render_page(env, site, _context(site, "/")) == "/fr/about"

    def test_styles_in_namespace(self, templated_site: Site, templated_root: Path, write_json) -> None:
        write_json(templated_root / "config" / "compile.json", {"styles": {"main": "/css/main.css"}})
        env = create_environment(templated_site)
        html = render_page(env, templated_site, _context(templated_site, "/"))
        assert '<link href="/css/main.css">' in html

    def test_missing_asset_package(self, templated_site: Site, templated_root: Path, write_json) -> None:
        write_json(templated_root / "config" / "compile.json", {"scripts": {"x": "~missing"}})
        env = create_environment(templated_site)
        with pytest.raises(MissingAssetDependency):
            render_page(env, templated_site, _context(templated_site, "/"))

"""Tests for linnet.build — static output of every locale and page."""

from pathlib import Path, PurePosixPath

import pytest

from linnet.build import build_site, output_path
from linnet.site import Site
from linnet.templating.integration import create_environment


class TestOutputPath:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("/", "index.html"),
            ("/de/", "de/index.html"),
            ("/about", "about/index.html"),
            ("/de/about", "de/about/index.html"),
            ("/feed.xml", "feed.xml"),
        ],
    )
    def test_mapping(self, url: str, expected: str) -> None:
        assert output_path(url) == PurePosixPath(expected)


class TestBuildSite:
    def test_writes_every_locale_and_page(self, templated_site: Site, tmp_path: Path) -> None:
        out = tmp_path / "out"
        written = build_site(templated_site, create_environment(templated_site), out)
        relative = [p.relative_to(out).as_posix() for p in written]
        assert relative == [
            "index.html",
            "about/index.html",
            "contact/index.html",
            "de/index.html",
            "de/about/index.html",
            "de/contact/index.html",
            "fr/index.html",
            "fr/about/index.html",
            "fr/contact/index.html",
        ]
        assert '<html lang="de">' in (out / "de" / "about" / "index.html").read_text(encoding="utf-8")

    def test_defaults_to_public_mode_dir(self, templated_site: Site) -> None:
        written = build_site(templated_site, create_environment(templated_site))
        assert written[0] == templated_site.public_dir / "index.html"
        assert templated_site.public_dir.name == "dev"

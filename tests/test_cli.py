"""Tests for linnet.cli — entry point, argument parsing, and commands."""

import json
from pathlib import Path

import pytest

from linnet.cli import main


class TestCLIHelp:
    @pytest.mark.parametrize(
        "argv",
        [["--help"], ["render", "--help"], ["assets", "--help"], ["pages", "--help"], ["build", "--help"]],
    )
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_render_missing_path(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render"])
        assert exc_info.value.code == 2

    def test_assets_bad_kind(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["assets", "fonts"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "linnet" in capsys.readouterr().out


class TestRender:
    def test_renders_to_stdout(self, templated_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["render", "/de/about", "--root", str(templated_root)])
        assert "<h1>about</h1>" in capsys.readouterr().out

    def test_redirect_halts_silently(self, templated_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "/about", "--root", str(templated_root), "--accept-language", "de"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == ""

    def test_cookie_option(self, templated_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["render", "/", "--root", str(templated_root), "--cookie", "fr", "--accept-language", "de"])
        assert '<html lang="fr">' in capsys.readouterr().out

    def test_not_found(self, templated_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "/missing", "--root", str(templated_root)])
        assert exc_info.value.code == 1
        assert "Page not found" in capsys.readouterr().err

    def test_missing_site(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "/", "--root", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestAssets:
    def test_prints_json(self, site_root: Path, write_json, capsys: pytest.CaptureFixture[str]) -> None:
        write_json(
            site_root / "config" / "compile.json",
            {"styles": {"main": {"dev": "/css/main.css", "live": "/css/main.min.css"}, "inline": "/css/c.css"}},
        )
        main(["assets", "styles", "--root", str(site_root)])
        rows = json.loads(capsys.readouterr().out)
        assert [r["src"] for r in rows] == ["/css/main.css", "/css/c.css"]
        assert rows[1]["inline"] is True

    def test_mode_override(self, site_root: Path, write_json, capsys: pytest.CaptureFixture[str]) -> None:
        write_json(site_root / "config" / "compile.json", {"styles": {"main": {"live": "/css/main.min.css"}}})
        main(["assets", "styles", "--root", str(site_root), "--mode", "live"])
        assert json.loads(capsys.readouterr().out)[0]["src"] == "/css/main.min.css"

    def test_missing_package(self, site_root: Path, write_json, capsys: pytest.CaptureFixture[str]) -> None:
        write_json(site_root / "config" / "compile.json", {"scripts": {"x": "~gone"}})
        with pytest.raises(SystemExit) as exc_info:
            main(["assets", "scripts", "--root", str(site_root)])
        assert exc_info.value.code == 1
        assert "gone" in capsys.readouterr().err


class TestPages:
    def test_lists_all_locales(self, site_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["pages", "--root", str(site_root)])
        out = capsys.readouterr().out
        assert out.splitlines()[0].split() == ["LOCALE", "PAGE", "URL"]
        assert "/de/about" in out
        assert "/fr/contact" in out

    def test_single_locale(self, site_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["pages", "--root", str(site_root), "--locale", "de"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert all(line.startswith(("LOCALE", "de")) for line in lines)

    def test_unknown_locale(self, site_root: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["pages", "--root", str(site_root), "--locale", "xx"])
        assert exc_info.value.code == 1


class TestBuild:
    def test_build(self, templated_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "public"
        main(["build", "--root", str(templated_root), "--out", str(out)])
        assert "Built 9 pages (dev)" in capsys.readouterr().out
        assert (out / "fr" / "contact" / "index.html").is_file()

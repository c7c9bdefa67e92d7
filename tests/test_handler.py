"""Tests for linnet.server.handler — outcomes mapped to responses."""

from pathlib import Path

import pytest
from kida import Environment

from linnet.config import ExecutionMode, SiteConfig
from linnet.server.handler import handle_request, locale_cookie
from linnet.site import Site
from linnet.templating.integration import create_environment


@pytest.fixture
def env(templated_site: Site) -> Environment:
    return create_environment(templated_site)


class TestHandleRequest:
    def test_page_sets_locale_cookie(self, templated_site: Site, env: Environment) -> None:
        response = handle_request(templated_site, "/de/about", {}, env=env)
        assert response.status == 200
        assert "<h1>about</h1>" in response.body
        assert len(response.cookies) == 1
        cookie = response.cookies[0]
        assert (cookie.name, cookie.value, cookie.path) == ("locale", "de", "/")
        assert cookie.max_age == 31536000

    def test_cookie_header_picks_locale(self, templated_site: Site, env: Environment) -> None:
        response = handle_request(
            templated_site,
            "/",
            {"Cookie": "theme=dark; locale=fr", "Accept-Language": "de"},
            env=env,
        )
        assert response.status == 200
        assert '<html lang="fr">' in response.body

    def test_header_names_case_insensitive(self, templated_site: Site, env: Environment) -> None:
        response = handle_request(templated_site, "/about", {"accept-language": "de"}, env=env)
        assert response.status == 302

    def test_accept_language_redirects(self, templated_site: Site, env: Environment) -> None:
        response = handle_request(
            templated_site,
            "/about",
            {"Accept-Language": "fr-FR,fr;q=0.9,en;q=0.8"},
            env=env,
        )
        assert response.status == 302
        assert response.header("Location") == "/fr/about"
        assert response.cookies == ()
        assert response.body == ""

    def test_not_found(self, templated_site: Site, env: Environment) -> None:
        response = handle_request(templated_site, "/missing", {}, env=env)
        assert response.status == 404
        assert "Page not found" in response.body
        assert response.cookies == ()

    def test_cli_mode_sets_no_cookie(self, templated_root: Path) -> None:
        site = Site(SiteConfig(root_dir=templated_root, execution_mode=ExecutionMode.CLI))
        response = handle_request(site, "/about", {}, env=create_environment(site))
        assert response.status == 200
        assert response.cookies == ()

    def test_cli_mode_halts_redirect(self, templated_root: Path) -> None:
        site = Site(SiteConfig(root_dir=templated_root, execution_mode=ExecutionMode.CLI))
        response = handle_request(site, "/about", {"Accept-Language": "de"}, env=create_environment(site))
        assert response.status == 204
        assert response.header("Location") is None
        assert response.body == ""


class TestLocaleCookie:
    def test_header_value(self, site: Site) -> None:
        value = locale_cookie(site, "de").to_header_value()
        assert value == "locale=de; Max-Age=31536000; Path=/"

    def test_custom_cookie_name(self, site_root: Path) -> None:
        site = Site(SiteConfig(root_dir=site_root, locale_cookie="lang"))
        assert locale_cookie(site, "fr").name == "lang"

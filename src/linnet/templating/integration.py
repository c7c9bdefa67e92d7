"""Kida environment setup and page rendering.

Creates a kida Environment over the site's template directory. The
environment is created once per process and reused for every request;
templates live at ``<template_dir>/pages/<locale>/<page>.html``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kida import Environment, FileSystemLoader

if TYPE_CHECKING:
    from linnet.context import RenderContext
    from linnet.site import Site


def create_environment(site: Site, *, loader: Any = None) -> Environment:
    """Create a kida Environment for *site*.

    Registers a ``url(path, locale=None)`` global so templates can link
    to any page in any locale. Pass *loader* to render from somewhere
    other than the configured template directory.
    """
    if loader is None:
        loader = FileSystemLoader(str(site.config.path(site.config.template_dir)))
    env = Environment(loader=loader, autoescape=site.config.autoescape)
    env.add_global("url", site.url)
    return env


def render_page(env: Environment, site: Site, context: RenderContext) -> str:
    """Render the context's page template to a string.

    The namespace is the context's flat template namespace plus the
    resolved ``styles`` and ``scripts`` lists; cascade keys may shadow
    either.

    Raises:
        MissingAssetDependency: If an asset package cannot be resolved.
    """
    namespace: dict[str, Any] = {
        "styles": site.styles(),
        "scripts": site.scripts(),
    }
    namespace.update(context.as_template_context())
    template = env.get_template(site.template_name(context))
    return template.render(namespace)

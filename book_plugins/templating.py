"""Jinja environment and fragment helpers for the injected markup."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup, Tag
from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used to render plugin fragments.

    Parameters
    ----------
    templates_dir : Path, optional
        Directory containing the ``*.jinja`` templates; defaults to the
        package's ``templates`` directory.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_fragment(template: Template, **context: object) -> Tag:
    """Render ``template`` and return its root element, ready to insert.

    Raises
    ------
    ValueError
        If the template renders no element.
    """
    html = template.render(**context)
    root = BeautifulSoup(html, "html.parser").find()
    if not isinstance(root, Tag):
        msg = f"Template '{template.name}' rendered no element."
        raise ValueError(msg)
    return root.extract()


__all__ = ["TEMPLATES_DIR", "build_environment", "render_fragment"]

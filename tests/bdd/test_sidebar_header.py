"""Behaviour tests for the sidebar header lifecycle.

These pytest-bdd scenarios drive a full build through
:class:`~book_plugins.host.BookBuild` for the three reference configurations
(title and author, nothing, title only) and check the navigation panel after
repeated navigation events. The feature file ``sidebar_header.feature``
describes the scenarios.

Usage
-----
Run ``pytest tests/bdd/test_sidebar_header.py -v`` after installing the test
extra (``uv sync --extra test``). No network or external services are used.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from book_plugins.host import BookBuild
from book_plugins.models import Page
from book_plugins.sidebar import NavigationPanel

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "sidebar_header.feature"
scenarios(FEATURE_FILE)

PANEL_HTML = (
    '<div class="book-summary"><nav><ul class="summary">'
    '<li class="chapter"><a href="intro.html">Introduction</a></li>'
    '<li class="chapter"><a href="usage.html">Usage</a></li>'
    '<li class="divider"></li>'
    '<li><a href="https://www.gitbook.com">Published with GitBook</a></li>'
    "</ul></nav></div>"
)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _panel_soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    panel = typ.cast("NavigationPanel", scenario_state["panel"])
    return BeautifulSoup(panel.html(), "html.parser")


@given(parsers.parse('a book titled "{title}" by "{author}"'))
def given_title_and_author(
    scenario_state: dict[str, object], title: str, author: str
) -> None:
    """Configure the sidebar with a title and an author."""
    scenario_state["raw"] = {"sidebar-style": {"title": title, "author": author}}


@given(parsers.parse('a book titled "{title}" with no author'))
def given_title_only(scenario_state: dict[str, object], title: str) -> None:
    """Configure the sidebar with a title only."""
    scenario_state["raw"] = {"sidebar-style": {"title": title}}


@given("a book without plugin configuration")
def given_no_config(scenario_state: dict[str, object]) -> None:
    """Leave every plugin option unset."""
    scenario_state["raw"] = {}


@given("a rendered navigation panel")
def given_panel(scenario_state: dict[str, object]) -> None:
    """Start the build with a freshly rendered navigation panel."""
    panel = NavigationPanel(PANEL_HTML)
    build = BookBuild(typ.cast("dict[str, typ.Any]", scenario_state["raw"]), panel=panel)
    build.start()
    scenario_state["panel"] = panel
    scenario_state["build"] = build


@when("the navigation panel is opened")
def when_panel_opened(scenario_state: dict[str, object]) -> None:
    """Fire the ``start`` event."""
    typ.cast("BookBuild", scenario_state["build"]).open_panel()
    panel = typ.cast("NavigationPanel", scenario_state["panel"])
    scenario_state["after_start"] = panel.html()


@when("the reader changes page twice")
def when_reader_navigates(scenario_state: dict[str, object]) -> None:
    """Fire ``navigation-change`` twice."""
    build = typ.cast("BookBuild", scenario_state["build"])
    build.navigate()
    build.navigate()


@when("a page with headings is rendered")
def when_page_rendered(scenario_state: dict[str, object]) -> None:
    """Fire the ``page`` event for a page with headings."""
    page = Page("intro.md", "<h1>Intro</h1><h2>Setup</h2>", level="1")
    build = typ.cast("BookBuild", scenario_state["build"])
    scenario_state["page"] = page
    scenario_state["rendered"] = build.render_page(page)


@then(parsers.parse('the panel has one header titled "{title}"'))
def then_single_header(scenario_state: dict[str, object], title: str) -> None:
    """Verify exactly one header exists and later events changed nothing."""
    soup = _panel_soup(scenario_state)
    headers = soup.select("div.sidebar-header")
    assert len(headers) == 1
    assert headers[0].select_one("h1.title").get_text() == title
    panel = typ.cast("NavigationPanel", scenario_state["panel"])
    assert panel.html() == scenario_state["after_start"]


@then("the panel has no header")
def then_no_header(scenario_state: dict[str, object]) -> None:
    """Verify the panel never received a header."""
    assert _panel_soup(scenario_state).select_one("div.sidebar-header") is None


@then(parsers.parse('the last summary entry reads "{text}"'))
def then_last_entry_reads(scenario_state: dict[str, object], text: str) -> None:
    """Verify the text of the panel's last entry."""
    assert _panel_soup(scenario_state).select(".summary li")[-1].get_text() == text


@then("the last summary entry is empty")
def then_last_entry_empty(scenario_state: dict[str, object]) -> None:
    """Verify the panel's last entry was cleared."""
    assert _panel_soup(scenario_state).select(".summary li")[-1].contents == []


@then("the page is returned unmodified")
def then_page_unmodified(scenario_state: dict[str, object]) -> None:
    """Verify the page handler passed the page through."""
    assert scenario_state["rendered"] is scenario_state["page"]

"""Behaviour tests for page anchor navigation.

The scenarios in ``page_anchors.feature`` render a page through the plugin
registry and check where the navigation block lands and how headings are
numbered.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from book_plugins.host import BookBuild
from book_plugins.models import Page

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "page_anchors.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a book with anchor navigation in "{mode}" mode'))
def given_anchor_mode(scenario_state: dict[str, object], mode: str) -> None:
    """Start a build with anchor navigation in ``mode``."""
    build = BookBuild({"ancre-navigation": {"mode": mode}})
    build.start()
    scenario_state["build"] = build


@given("a page with a table of contents placeholder")
def given_placeholder_page(scenario_state: dict[str, object]) -> None:
    """Prepare a page carrying an ``<extoc>`` placeholder."""
    scenario_state["page"] = Page(
        "usage.md",
        "<p>Lead</p><extoc></extoc><h2>Install</h2><h3>Linux</h3><h2>Run</h2>",
        level="2",
    )


@given("a page opting out of navigation")
def given_opted_out_page(scenario_state: dict[str, object]) -> None:
    """Prepare a page carrying the ``ex_nonav`` marker."""
    scenario_state["page"] = Page("usage.md", "<!-- ex_nonav --><h2>Install</h2>")


@when("the page is rendered")
def when_page_rendered(scenario_state: dict[str, object]) -> None:
    """Fire the ``page`` event."""
    build = typ.cast("BookBuild", scenario_state["build"])
    scenario_state["rendered"] = build.render_page(
        typ.cast("Page", scenario_state["page"])
    )


@then("the navigation block replaces the placeholder")
def then_navigation_replaces_placeholder(scenario_state: dict[str, object]) -> None:
    """Verify the navigation block sits where the placeholder was."""
    rendered = typ.cast("Page", scenario_state["rendered"])
    soup = BeautifulSoup(rendered.content, "html.parser")
    navigation = soup.find(id="anchor-navigation-ex")
    assert navigation is not None
    assert soup.find("extoc") is None
    assert navigation.find_previous_sibling().name == "p"
    assert navigation.find_next_sibling().name == "h2"


@then("the headings are numbered from the summary level")
def then_headings_numbered(scenario_state: dict[str, object]) -> None:
    """Verify headings carry the page level followed by their position."""
    rendered = typ.cast("Page", scenario_state["rendered"])
    soup = BeautifulSoup(rendered.content, "html.parser")
    assert [h.get_text() for h in soup.find_all(["h2", "h3"])] == [
        "2.1. Install",
        "2.1.1. Linux",
        "2.2. Run",
    ]


@then("the page is returned unmodified")
def then_page_unmodified(scenario_state: dict[str, object]) -> None:
    """Verify the page handler passed the page through."""
    assert scenario_state["rendered"] is scenario_state["page"]

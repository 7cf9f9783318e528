"""Unit tests for the hook registry, event dispatch, and build session."""

from __future__ import annotations

import typing as typ

import pytest

from book_plugins.errors import HookDispatchError, HookRegistrationError, SessionStateError
from book_plugins.hooks import (
    HookRegistry,
    InitEvent,
    NavigationChangeEvent,
    PageEvent,
    StartEvent,
)
from book_plugins.models import Page
from book_plugins.plugins import ancre_navigation, registry, sidebar_style
from book_plugins.session import BuildSession


@pytest.fixture
def session() -> BuildSession:
    """Return an initialised session with an all-defaults configuration."""
    build_session = BuildSession(raw_config={})
    build_session.resolve()
    return build_session


def test_notification_handlers_run_in_registration_order(session: BuildSession) -> None:
    calls: list[str] = []
    hooks = HookRegistry()
    hooks.register("navigation-change", lambda _s, _e: calls.append("first"))
    hooks.register("navigation-change", lambda _s, _e: calls.append("second"))

    assert hooks.dispatch(NavigationChangeEvent(), session) is None
    assert calls == ["first", "second"]


def test_page_handlers_form_a_pipeline(session: BuildSession) -> None:
    hooks = HookRegistry()

    def _append(suffix: str) -> typ.Callable[[BuildSession, PageEvent], Page]:
        def _handler(_session: BuildSession, event: PageEvent) -> Page:
            return event.page.with_content(event.page.content + suffix)

        return _handler

    hooks.register("page", _append("-a"))
    hooks.register("page", _append("-b"))

    result = hooks.dispatch(PageEvent(Page("p.md", "body")), session)
    assert result == Page("p.md", "body-a-b")


def test_page_dispatch_without_handlers_returns_input(session: BuildSession) -> None:
    page = Page("p.md", "body")
    assert HookRegistry().dispatch(PageEvent(page), session) is page


def test_decorator_and_aliases_register_handlers() -> None:
    hooks = HookRegistry()

    @hooks.hook("page-render")
    def _render(_session: BuildSession, event: PageEvent) -> Page:
        return event.page

    assert hooks.handlers("page") == (_render,)
    assert hooks.handlers("page-render") == (_render,)


def test_unknown_event_is_rejected() -> None:
    with pytest.raises(HookRegistrationError, match="Unknown event"):
        HookRegistry().register("finish", lambda _s, _e: None)


def test_duplicate_registration_is_rejected() -> None:
    def _handler(_session: BuildSession, _event: InitEvent) -> None:
        return None

    hooks = HookRegistry()
    hooks.register("init", _handler)
    with pytest.raises(HookRegistrationError, match="already registered"):
        hooks.register("init", _handler)


def test_sealed_registry_rejects_registration() -> None:
    hooks = HookRegistry()
    hooks.seal()
    assert hooks.sealed
    with pytest.raises(HookRegistrationError, match="sealed"):
        hooks.register("init", lambda _s, _e: None)


def test_failing_handler_aborts_dispatch_and_propagates(session: BuildSession) -> None:
    calls: list[str] = []
    hooks = HookRegistry()

    def _explode(_session: BuildSession, _event: StartEvent) -> None:
        msg = "panel unavailable"
        raise RuntimeError(msg)

    hooks.register("start", _explode)
    hooks.register("start", lambda _s, _e: calls.append("after"))

    with pytest.raises(HookDispatchError) as excinfo:
        hooks.dispatch(StartEvent(), session)

    assert calls == []
    assert excinfo.value.event_name == "start"
    assert "_explode" in excinfo.value.handler_name
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_pipeline_handler_must_return_a_page(session: BuildSession) -> None:
    hooks = HookRegistry()
    hooks.register("page", lambda _s, event: event.page.content)

    with pytest.raises(HookDispatchError, match="expected a Page") as excinfo:
        hooks.dispatch(PageEvent(Page("p.md", "body")), session)
    assert excinfo.value.event_name == "page"
    assert excinfo.value.__cause__ is None


def test_plugin_registry_is_sealed_with_plugin_handlers() -> None:
    assert registry.sealed
    assert registry.handlers("init") == (ancre_navigation.on_init,)
    assert registry.handlers("page") == (ancre_navigation.on_page,)
    assert registry.handlers("start") == (sidebar_style.on_start,)
    assert registry.handlers("navigation-change") == (
        sidebar_style.on_navigation_change,
    )


def test_session_config_requires_init() -> None:
    build_session = BuildSession(raw_config={"sidebar-style": {"title": "Guide"}})
    assert not build_session.initialised
    with pytest.raises(SessionStateError):
        _ = build_session.config


def test_init_event_freezes_session_config() -> None:
    build_session = BuildSession(raw_config={"sidebar-style": {"title": "Guide"}})
    registry.dispatch(InitEvent(), build_session)

    assert build_session.initialised
    assert build_session.config.title == "Guide"
    later = build_session.resolve({"sidebar-style": {"title": "Manual"}})
    assert later is build_session.config
    assert later.title == "Guide"


def test_page_event_before_init_propagates_session_error() -> None:
    build_session = BuildSession(raw_config={"ancre-navigation": {}})
    with pytest.raises(HookDispatchError) as excinfo:
        registry.dispatch(PageEvent(Page("p.md", "<h1>A</h1>")), build_session)
    assert isinstance(excinfo.value.__cause__, SessionStateError)


def test_sessions_do_not_share_configuration() -> None:
    first = BuildSession(raw_config={"sidebar-style": {"title": "Guide"}})
    second = BuildSession(raw_config=None)
    registry.dispatch(InitEvent(), first)
    registry.dispatch(InitEvent(), second)
    assert first.config.title == "Guide"
    assert second.config.title is None

"""Unit tests for the request path grammar."""

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from flatwiki.core.errors import InitializationError, InvalidPathError
from flatwiki.core.routing import (
    VALID_PATH,
    Action,
    PageTitle,
    RouteMatch,
    Router,
    compile_path_pattern,
    match_path,
)


def make_request(path: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": [], "query_string": b""})


class TestMatchPath:
    @pytest.mark.parametrize(
        "path, action, title",
        [
            ("/view/Foo1", Action.VIEW, "Foo1"),
            ("/edit/FrontPage", Action.EDIT, "FrontPage"),
            ("/save/abc123", Action.SAVE, "abc123"),
        ],
    )
    def test_accepted(self, path, action, title):
        assert match_path(path) == RouteMatch(action=action, title=title)

    @pytest.mark.parametrize(
        "path",
        [
            "/",
            "/view/",
            "/view",
            "/delete/Foo",
            "/view/Foo-1",
            "/view/My Page",
            "/view/../secret",
            "/view/a/b",
            "/VIEW/Foo",
            "view/Foo",
            "/view/Foo/",
            "/view/Foo\n",
        ],
    )
    def test_rejected(self, path):
        with pytest.raises(InvalidPathError):
            match_path(path)

    def test_pattern_source(self):
        assert VALID_PATH.pattern == r"^/(edit|save|view)/([a-zA-Z0-9]+)$"

    def test_bad_grammar_fails_at_compile(self):
        with pytest.raises(InitializationError):
            compile_path_pattern(("view",), title_grammar="[a-z")


class TestRouter:
    def test_router_is_immutable(self):
        router = Router()
        with pytest.raises(AttributeError):
            router.pattern = None

    def test_title_for_returns_dependency(self):
        dep = Router().title_for(Action.VIEW)
        assert isinstance(dep, PageTitle)
        assert dep.action is Action.VIEW

    def test_dependency_extracts_title(self):
        dep = Router().title_for(Action.EDIT)
        assert dep(make_request("/edit/Hello")) == "Hello"

    def test_dependency_rejects_bad_title(self):
        dep = Router().title_for(Action.VIEW)
        with pytest.raises(HTTPException) as exc_info:
            dep(make_request("/view/Not-Valid"))
        assert exc_info.value.status_code == 404

    def test_dependency_rejects_other_action(self):
        dep = Router().title_for(Action.SAVE)
        with pytest.raises(HTTPException) as exc_info:
            dep(make_request("/view/Hello"))
        assert exc_info.value.status_code == 404

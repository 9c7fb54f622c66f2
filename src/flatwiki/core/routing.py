"""Request path grammar and title extraction.

Every page URL has the form ``/<action>/<title>``. The router is the only
gate between a raw request path and the page handlers: anything outside
the grammar is answered with 404 before handler code runs.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from fastapi import HTTPException, Request

from flatwiki.core.errors import InitializationError, InvalidPathError


class Action(str, Enum):
    """Supported page actions."""

    EDIT = "edit"
    SAVE = "save"
    VIEW = "view"


TITLE_GRAMMAR = r"[a-zA-Z0-9]+"


def compile_path_pattern(actions: tuple[str, ...], title_grammar: str = TITLE_GRAMMAR) -> re.Pattern:
    """Compile the ``/<action>/<title>`` grammar for the given actions.

    Raises:
        InitializationError: If the grammar does not compile.
    """
    alternatives = "|".join(re.escape(a) for a in actions)
    try:
        return re.compile(rf"^/({alternatives})/({title_grammar})$")
    except re.error as e:
        raise InitializationError(f"Invalid route grammar: {e}") from e


# ^/(edit|save|view)/([a-zA-Z0-9]+)$
VALID_PATH = compile_path_pattern(tuple(a.value for a in Action))


@dataclass(frozen=True)
class RouteMatch:
    """A request path that passed validation."""

    action: Action
    title: str


@dataclass(frozen=True)
class Router:
    """Immutable route grammar shared by all requests."""

    pattern: re.Pattern = field(default=VALID_PATH)

    def match(self, path: str) -> RouteMatch:
        """Match a request path against the grammar.

        Raises:
            InvalidPathError: If the path is not ``/<action>/<title>``.
        """
        m = self.pattern.fullmatch(path)
        if m is None:
            raise InvalidPathError(path)
        return RouteMatch(action=Action(m.group(1)), title=m.group(2))

    def title_for(self, action: Action) -> "PageTitle":
        """Return a dependency that yields the validated title for ``action``."""
        return PageTitle(self, action)


def match_path(path: str) -> RouteMatch:
    """Match ``path`` with the default router."""
    return Router().match(path)


class PageTitle:
    """FastAPI dependency extracting the page title from the request path.

    Rejects the request with 404 when the path does not match the grammar
    or names a different action than the route it arrived on.
    """

    def __init__(self, router: Router, action: Action):
        self.router = router
        self.action = action

    def __call__(self, request: Request) -> str:
        try:
            route = self.router.match(request.url.path)
        except InvalidPathError:
            raise HTTPException(status_code=404, detail="404 page not found") from None
        if route.action is not self.action:
            raise HTTPException(status_code=404, detail="404 page not found")
        return route.title

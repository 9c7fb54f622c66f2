"""HTML rendering of wiki pages."""

import logging
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from flatwiki.core.errors import InitializationError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
REQUIRED_TEMPLATES = ("view.html", "edit.html")


class TemplateRenderer:
    """Renders pages through a fixed set of pre-compiled templates.

    All required templates are loaded and parsed at construction, so a
    missing or broken template stops the application at startup instead
    of failing a request later on.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        required: tuple[str, ...] = REQUIRED_TEMPLATES,
        **template_globals: Any,
    ):
        self.template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
        env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        env.globals.update(template_globals)

        for name in required:
            try:
                env.get_template(name)
            except TemplateError as e:
                raise InitializationError(
                    f"Cannot load template {name!r} from {self.template_dir}: {e}"
                ) from e
        logger.debug("Compiled templates %s from %s", ", ".join(required), self.template_dir)

        self.templates = Jinja2Templates(env=env)

    def render(self, request: Request, name: str, **context: Any) -> Response:
        """Render the named template, usually with a ``page`` in the context.

        Returns a 500 response carrying the error text if rendering fails.
        """
        try:
            return self.templates.TemplateResponse(request, name, context)
        except TemplateError as e:
            logger.error("Failed to render %s: %s", name, e)
            return PlainTextResponse(str(e), status_code=500)

"""FlatWiki FastAPI application."""

import logging

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from flatwiki.config import Settings
from flatwiki.core.errors import PageNotFoundError, PageStorageError
from flatwiki.core.links import extract_page_links, render_body
from flatwiki.core.models import Page
from flatwiki.core.render import TemplateRenderer
from flatwiki.core.routing import Action, Router
from flatwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the wiki application.

    Templates, route grammar and storage are prepared once here and shared
    read-only by every request. Template problems raise
    InitializationError before the app is returned.
    """
    settings = settings or Settings()

    renderer = TemplateRenderer(settings.template_dir, app_title=settings.app_title)
    router = Router()
    storage = FileStorage(settings.data_dir, suffix=settings.page_suffix)

    app = FastAPI(title=settings.app_title, debug=settings.debug, redirect_slashes=False)
    app.state.settings = settings
    app.state.storage = storage
    app.state.renderer = renderer
    app.state.router = router

    logger.info("Serving pages from %s", storage.base_path.resolve())

    @app.get("/")
    async def index():
        """Front page - redirect to the default page."""
        return RedirectResponse(url=f"/view/{settings.front_page}", status_code=302)

    @app.get("/pages")
    async def list_pages(request: Request) -> Response:
        """List all stored pages."""
        titles = await storage.list_pages()
        return renderer.render(request, "list.html", titles=titles)

    @app.get("/view/{name}")
    async def view_page(request: Request, title: str = Depends(router.title_for(Action.VIEW))) -> Response:
        """View a wiki page."""
        try:
            page = await storage.load_page(title)
        except PageNotFoundError:
            # Page doesn't exist - redirect to edit to create it
            return RedirectResponse(url=f"/edit/{title}", status_code=302)
        except PageStorageError as e:
            return PlainTextResponse(str(e), status_code=500)

        # Linked pages that have not been written yet
        missing_links = [
            name
            for name in dict.fromkeys(extract_page_links(page.text))
            if not await storage.page_exists(name)
        ]
        return renderer.render(
            request,
            "view.html",
            page=page,
            html_content=render_body(page.body),
            missing_links=missing_links,
        )

    @app.get("/edit/{name}")
    async def edit_page(request: Request, title: str = Depends(router.title_for(Action.EDIT))) -> Response:
        """Edit page form."""
        try:
            page = await storage.load_page(title)
        except PageNotFoundError:
            # New page
            page = Page(title=title)
        except PageStorageError as e:
            return PlainTextResponse(str(e), status_code=500)

        return renderer.render(request, "edit.html", page=page)

    @app.post("/save/{name}")
    async def save_page(
        title: str = Depends(router.title_for(Action.SAVE)),
        body: str = Form(""),
    ) -> Response:
        """Save page content."""
        page = Page(title=title, body=body.encode("utf-8"))
        try:
            await storage.save_page(page)
        except PageStorageError as e:
            return PlainTextResponse(str(e), status_code=500)

        return RedirectResponse(url=f"/view/{title}", status_code=302)

    return app

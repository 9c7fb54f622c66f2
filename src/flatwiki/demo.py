"""Standalone demonstration of file-backed page persistence.

Saves a sample page next to the current working directory and reads it
back. This is independent of the server's configured data directory.
"""

import asyncio
import logging
from pathlib import Path

from flatwiki.core.models import Page
from flatwiki.core.storage import FileStorage

logger = logging.getLogger(__name__)

DEMO_TITLE = "TestPage"
DEMO_BODY = b"This is a sample Page."


async def run_demo(directory: Path | None = None) -> Page:
    """Save the sample page, load it again and return the loaded copy."""
    storage = FileStorage(directory or Path.cwd())
    await storage.save_page(Page(title=DEMO_TITLE, body=DEMO_BODY))
    page = await storage.load_page(DEMO_TITLE)
    logger.debug("Demo page stored in %s", storage.base_path)
    return page


def main(directory: Path | None = None) -> Page:
    page = asyncio.run(run_demo(directory))
    print(page.text)
    return page

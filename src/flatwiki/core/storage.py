"""Storage abstraction for wiki pages."""

import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import (
    InvalidTitleError,
    PageNotFoundError,
    PageReadError,
    PageWriteError,
)
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load_page(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if missing."""
        ...

    @abstractmethod
    async def save_page(self, page: Page) -> Page:
        """Save a page, replacing any previous content."""
        ...

    @abstractmethod
    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        ...

    @abstractmethod
    async def list_pages(self) -> list[str]:
        """List all page titles."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is one file in ``base_path`` named ``<title><suffix>``,
    holding the page body verbatim. Titles must be plain alphanumeric
    names, which keeps every file inside ``base_path``.
    """

    TITLE_PATTERN = re.compile(r"[a-zA-Z0-9]+")
    FILE_MODE = 0o600

    def __init__(self, base_path: Path, suffix: str = ".txt"):
        self.base_path = Path(base_path)
        self.suffix = suffix
        self.base_path.mkdir(parents=True, exist_ok=True)

    def validate_title(self, title: str) -> str:
        """Return ``title`` unchanged or raise InvalidTitleError."""
        if not isinstance(title, str) or not self.TITLE_PATTERN.fullmatch(title):
            raise InvalidTitleError(title)
        return title

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return self.validate_title(title) + self.suffix

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / self._title_to_filename(title)

    async def load_page(self, title: str) -> Page:
        """Load a page."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except FileNotFoundError:
            raise PageNotFoundError(title) from None
        except OSError as e:
            logger.warning("Failed to read page %s: %s", title, e)
            raise PageReadError(title, str(e)) from e

        logger.debug("Loaded page %s (%d bytes)", title, len(body))
        return Page(title=title, body=body)

    async def save_page(self, page: Page) -> Page:
        """Save a page."""
        path = self._get_path(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            logger.error("Failed to save page %s: %s", page.title, e)
            raise PageWriteError(page.title, str(e)) from e

        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))
        return page

    async def page_exists(self, title: str) -> bool:
        """Check if a page exists."""
        return self._get_path(title).is_file()

    async def list_pages(self) -> list[str]:
        """List all page titles."""
        titles = []
        for path in self.base_path.glob(f"*{self.suffix}"):
            title = path.name.removesuffix(self.suffix)
            if path.is_file() and self.TITLE_PATTERN.fullmatch(title):
                titles.append(title)
        return sorted(titles)

"""Exception hierarchy for FlatWiki."""


class WikiError(Exception):
    """Base class for all wiki errors."""


class InitializationError(WikiError):
    """Startup resources (templates, route grammar) could not be prepared."""


class InvalidPathError(WikiError):
    """Request path does not match the route grammar."""

    def __init__(self, path: str):
        super().__init__(f"Invalid page path: {path!r}")
        self.path = path


class InvalidTitleError(WikiError, ValueError):
    """Page title is not a plain alphanumeric name."""

    def __init__(self, title: str):
        super().__init__(f"Invalid page title: {title!r}")
        self.title = title


class PageNotFoundError(WikiError):
    """No stored file exists for the page."""

    def __init__(self, title: str):
        super().__init__(f"Page not found: {title}")
        self.title = title


class PageStorageError(WikiError):
    """Reading or writing a page file failed."""

    def __init__(self, title: str, reason: str):
        super().__init__(reason)
        self.title = title
        self.reason = reason


class PageReadError(PageStorageError):
    """A page file exists but could not be read."""


class PageWriteError(PageStorageError):
    """A page file could not be written."""

"""Data models for FlatWiki."""

from pydantic import BaseModel, ConfigDict


class Page(BaseModel):
    """Represents a wiki page."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Return the body decoded for display."""
        return self.body.decode("utf-8", errors="replace")

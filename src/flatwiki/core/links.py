"""Inter-page link rewriting.

Page bodies reference other pages as ``[PageName]``. Only alphanumeric
names inside the brackets count as links; anything else is left as
plain text.
"""

import re

from markupsafe import Markup, escape


# Pattern for inter-page links: [PageName]
INTER_PAGE_PATTERN = re.compile(r"\[([a-zA-Z0-9]+)\]")


def _link_for(m: re.Match) -> str:
    name = m.group(1)
    return f'<a href="/view/{name}">{name}</a>'


def replace_interpage_links(text: str) -> str:
    """Replace every ``[PageName]`` in ``text`` with an HTML anchor.

    Args:
        text: Page text, already safe to embed in HTML.

    Returns:
        Text with each link token rewritten to point at ``/view/PageName``.
    """
    return INTER_PAGE_PATTERN.sub(_link_for, text)


def render_body(body: bytes) -> Markup:
    """Escape a raw page body and rewrite its inter-page links.

    Args:
        body: Raw page content as stored.

    Returns:
        Markup ready to be inserted into the view template.
    """
    escaped = str(escape(body.decode("utf-8", errors="replace")))
    return Markup(replace_interpage_links(escaped))


def extract_page_links(text: str) -> list[str]:
    """Extract all page names referenced by inter-page links, in order."""
    return INTER_PAGE_PATTERN.findall(text)

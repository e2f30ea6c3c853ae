"""Read candidate page links from a single listing page."""

import logging

from bs4 import BeautifulSoup
from pydantic import BaseModel

from component_harvest.utils.url_utils import page_path

logger = logging.getLogger(__name__)


class DiscoveredURL(BaseModel):
    """A component page linked from the listing."""

    url: str  # Site path, e.g. /components/marketing/sections/heroes
    title: str | None = None


class ListingDiscoverer:
    """Collect page links from the listing page, in document order."""

    def __init__(self, selector: str = ".grid a", max_links: int = 0):
        self.selector = selector
        self.max_links = max_links  # 0 = all

    def discover(self, html: str) -> list[DiscoveredURL]:
        """Return the linked pages, capped at ``max_links`` when set."""
        soup = BeautifulSoup(html, "lxml")
        discovered: list[DiscoveredURL] = []

        for link in soup.select(self.selector):
            href = link.get("href")
            if not href:
                continue
            path = page_path(str(href))
            if not path:
                continue
            title = link.get_text(strip=True) or None
            discovered.append(DiscoveredURL(url=path, title=title))
            if self.max_links > 0 and len(discovered) >= self.max_links:
                break

        logger.debug("Listing page links: %d", len(discovered))
        return discovered

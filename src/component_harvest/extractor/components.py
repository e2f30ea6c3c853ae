"""Locate component snippets and their catalog labels on a library page."""

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag
from pydantic import BaseModel

from component_harvest.config import ExtractionConfig, ExtractionMode
from component_harvest.errors import ConfigurationError, ExtractionError, NavigationError
from component_harvest.utils.paths import require_segment

logger = logging.getLogger(__name__)

ALPINE_SCRIPT = (
    '<script src="https://cdn.jsdelivr.net/gh/alpinejs/alpine@v2.0.1/dist/alpine.js"'
    " defer></script>"
)

# The code placeholder sits three elements below the component's container.
_CONTAINER_DEPTH = 3


class RawComponent(BaseModel):
    """A component's markup as found on the page, before transformation."""

    title: str
    logical_path: str
    raw_code: str


@dataclass
class PageExtraction:
    """Everything extracted from one page."""

    url: str
    category: str
    subcategory: str
    section: str
    components: list[RawComponent] = field(default_factory=list)
    failures: list[ExtractionError] = field(default_factory=list)


class ComponentExtractor:
    """Extract component snippets from a page of the component library."""

    def __init__(self, config: ExtractionConfig):
        self.config = config

    def extract(self, html: str, url: str) -> PageExtraction:
        """Extract labels and components from a page.

        ``url`` is the page's request path (``/components/buttons``); it
        prefixes every component's logical path. Raises NavigationError when
        the page cannot be placed in the catalog. Components that cannot be
        extracted are logged and collected in ``failures``.
        """
        soup = BeautifulSoup(html, "lxml")
        category, subcategory = self._nav_labels(soup, url)
        section = self._section_label(soup, url)

        extraction = PageExtraction(
            url=url, category=category, subcategory=subcategory, section=section
        )

        snippets = soup.find_all("textarea")
        logger.info(
            "Found %d component%s on %s",
            len(snippets),
            "" if len(snippets) == 1 else "s",
            url,
        )

        for snippet in snippets:
            try:
                extraction.components.append(self._extract_component(snippet, url))
            except ExtractionError as e:
                logger.warning("Skipping component: %s", e)
                extraction.failures.append(e)

        return extraction

    @staticmethod
    def _nav_labels(soup: BeautifulSoup, url: str) -> tuple[str, str]:
        links = soup.select("nav a")
        if len(links) < 2:
            raise NavigationError(
                f"Expected category and subcategory links in <nav>, found {len(links)}",
                url,
            )
        category = links[0].get_text().strip()
        subcategory = links[1].get_text().strip()
        if not category or not subcategory:
            raise NavigationError("Empty category or subcategory link text", url)
        return category, subcategory

    @staticmethod
    def _section_label(soup: BeautifulSoup, url: str) -> str:
        heading = soup.find("h2")
        section = heading.get_text().strip() if heading else ""
        if not section:
            raise NavigationError("No <h2> section heading", url)
        return section

    def _extract_component(self, snippet: Tag, url: str) -> RawComponent:
        container = self._container(snippet, url)

        heading = container.find("h3")
        if heading is None:
            raise ExtractionError("no <h3> title in component container", url)
        title = heading.get_text().strip()

        try:
            filename = require_segment(title)
        except ValueError as e:
            raise ExtractionError(str(e), url, title) from e

        mode = self.config.mode
        if mode is ExtractionMode.EMBEDDED_FRAMEWORK:
            code = self._embedded_code(container, url, title)
        elif mode is ExtractionMode.SOURCE_COMMENT:
            code = snippet.get_text().strip()
        else:
            raise ConfigurationError(f"Unknown extraction mode: {mode}")

        return RawComponent(title=title, logical_path=f"{url}/{filename}", raw_code=code)

    @staticmethod
    def _container(snippet: Tag, url: str) -> Tag:
        container = snippet
        for _ in range(_CONTAINER_DEPTH):
            if container.parent is None:
                raise ExtractionError("code placeholder has no component container", url)
            container = container.parent
        return container

    @staticmethod
    def _embedded_code(container: Tag, url: str, title: str) -> str:
        """Recover markup from the preview iframe next to the placeholder."""
        scope = container.parent or container
        iframe = scope.find("iframe")
        srcdoc = iframe.get("srcdoc") if iframe else None
        if not srcdoc:
            raise ExtractionError("no preview iframe with srcdoc", url, title)

        body = BeautifulSoup(srcdoc, "lxml").body
        if body is None:
            raise ExtractionError("preview document has no <body>", url, title)

        # A bare wrapper element is unwrapped; a styled one is kept whole.
        first = body.find(recursive=False)
        if first is not None and not first.get("class"):
            code = first.decode_contents()
        else:
            code = body.decode_contents()

        return f"{ALPINE_SCRIPT}\n\n{code}"

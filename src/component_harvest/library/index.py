"""Render browsable index pages for an assembled catalog.

The library index (``index.html`` under the output root) lists categories,
subcategories and sections. Each section gets a page at its own catalog URL
(``<page path>/index.html``) linking to, and previewing, its component files.
The catalog is only read.
"""

import logging
import posixpath
from collections import defaultdict
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from component_harvest.library.tree import Catalog

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Component Library"


class IndexBuilder:
    """Write index pages mirroring the catalog's three levels."""

    def __init__(
        self,
        output_root: Path,
        *,
        title: str = DEFAULT_TITLE,
        templates_dir: Path | None = None,
    ):
        self.output_root = Path(output_root)
        self.title = title
        self.templates_dir = templates_dir or Path(__file__).resolve().parent.parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build(self, catalog: Catalog) -> list[Path]:
        """Render the library index and one page per section URL."""
        tree: dict[str, dict[str, list[dict[str, Any]]]] = {}
        pages: dict[str, list[dict[str, Any]]] = defaultdict(list)
        taken = {
            component.url
            for _, _, _, section in catalog.sections()
            for component in section.components
        }

        for category, subcategory, name, section in catalog.sections():
            if section.url in taken:
                logger.warning(
                    "Not writing section page %s: a component is stored at that path", section.url
                )
            tree.setdefault(category, {}).setdefault(subcategory, []).append(
                {
                    "name": name,
                    "href": None if section.url in taken else section.url.lstrip("/"),
                    "count": len(section.components),
                }
            )
            section_dir = posixpath.dirname(section.url)
            pages[section.url].append(
                {
                    "category": category,
                    "subcategory": subcategory,
                    "name": name,
                    "components": [
                        {
                            "hash": component.hash,
                            "title": component.title,
                            "href": posixpath.relpath(component.url, section_dir),
                        }
                        for component in section.components
                    ],
                }
            )

        written = [
            self._render(
                self.output_root / "index.html",
                "library_index.jinja",
                title=self.title,
                tree=tree,
                section_count=catalog.section_count,
                component_count=catalog.component_count,
            )
        ]
        for url, entries in pages.items():
            if url in taken:
                continue
            written.append(
                self._render(
                    self.output_root / url.lstrip("/"),
                    "section_index.jinja",
                    title=self.title,
                    entries=entries,
                    home_href=posixpath.relpath("/index.html", posixpath.dirname(url)),
                )
            )

        logger.info("Wrote %d index page(s)", len(written))
        return written

    def _render(self, path: Path, template_name: str, **context: Any) -> Path:
        html = self.env.get_template(template_name).render(**context)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

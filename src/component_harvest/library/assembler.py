"""Turn one fetched page into component files and a catalog fragment."""

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import aiofiles  # type: ignore[import-untyped]

from component_harvest.config import AppConfig
from component_harvest.errors import OutputError
from component_harvest.extractor import ComponentExtractor, PageExtraction, RawComponent
from component_harvest.library.models import Component, Section
from component_harvest.transformers import TransformContext, TransformerPipeline
from component_harvest.utils.paths import component_hash

logger = logging.getLogger(__name__)


@dataclass
class AssembledPage:
    """Outcome of assembling one page."""

    extraction: PageExtraction
    section: Section
    written: list[Path] = field(default_factory=list)

    @property
    def fragment(self) -> dict[str, Any]:
        """The page's catalog fragment: category -> subcategory -> section."""
        return {
            self.extraction.category: {
                self.extraction.subcategory: {
                    self.extraction.section: self.section.model_dump(),
                }
            }
        }


class LibraryAssembler:
    """Extract, transform and write the components of each page."""

    def __init__(
        self,
        config: AppConfig,
        extractor: ComponentExtractor,
        pipeline: TransformerPipeline,
    ):
        self.config = config
        self.output_root = Path(config.output.path)
        self.extractor = extractor
        self.pipeline = pipeline

    def component_path(self, logical_path: str) -> Path:
        """File a component is written to, mirroring its logical path."""
        parent = posixpath.dirname(logical_path).strip("/")
        name = posixpath.basename(logical_path)
        return self.output_root / parent / f"{name}.html"

    async def assemble_page(self, html: str, url: str) -> AssembledPage:
        """Write every component found on the page and describe the result.

        Components are processed in page order. Raises NavigationError for an
        unplaceable page and OutputError when a file cannot be written; in
        both cases no fragment is produced for the page.
        """
        extraction = self.extractor.extract(html, url)
        section = Section(url=f"{url}/index.html")
        assembled = AssembledPage(extraction=extraction, section=section)

        for raw in extraction.components:
            code = self.pipeline.apply(raw.raw_code, self._context(raw))
            path = self.component_path(raw.logical_path)
            await self._write(path, code, url)
            assembled.written.append(path)
            section.components.append(
                Component(
                    hash=component_hash(raw.logical_path),
                    title=raw.title,
                    url=f"{raw.logical_path}.html",
                )
            )

        return assembled

    def _context(self, raw: RawComponent) -> TransformContext:
        return TransformContext(
            root_url=self.config.root_url,
            output_root=self.output_root,
            title=raw.title,
            logical_path=raw.logical_path,
        )

    @staticmethod
    async def _write(path: Path, code: str, url: str) -> None:
        logger.info("Writing %s", path.name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
                await f.write(code)
        except OSError as e:
            raise OutputError(f"Cannot write component ({e.strerror or e})", url, path) from e

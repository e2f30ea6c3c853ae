"""Main orchestrator that coordinates the harvesting pipeline."""

import json
import logging
import time
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from component_harvest.config import AppConfig
from component_harvest.discovery import DiscoveredURL, ListingDiscoverer
from component_harvest.errors import (
    ConfigurationError,
    ExtractionError,
    FetchError,
    NavigationError,
    OutputError,
)
from component_harvest.extractor import ComponentExtractor
from component_harvest.fetcher import BaseFetcher, HttpFetcher, PlaywrightFetcher
from component_harvest.library import Catalog, IndexBuilder, LibraryAssembler
from component_harvest.transformers import TransformerPipeline
from component_harvest.utils.url_utils import absolute_url

logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Why a page was left out of the catalog."""

    FETCH = "fetch"
    NAVIGATION = "navigation"
    OUTPUT = "output"


@dataclass
class PageError:
    """A page that could not be harvested."""

    url: str
    message: str
    category: ErrorCategory


class HarvestResult:
    """Result of a harvesting run."""

    def __init__(self):
        self.catalog = Catalog()
        self.pages: list[str] = []
        self.errors: list[PageError] = []
        self.component_failures: list[ExtractionError] = []
        self.written: list[Path] = []
        self.index_pages: list[Path] = []
        self.started: float = 0.0
        self.finished: float = 0.0

    @property
    def success_count(self) -> int:
        return len(self.pages)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def duration(self) -> float:
        if self.started and self.finished:
            return self.finished - self.started
        return 0.0


class Orchestrator:
    """Coordinates login, discovery and per-page assembly.

    Pages are processed one at a time, in listing order, and each page's
    fragment is merged into a single catalog.
    """

    def __init__(
        self,
        config: AppConfig,
        console: Console | None = None,
        fetcher: BaseFetcher | None = None,
    ):
        self.config = config
        self.console = console or Console()
        self._fetcher = fetcher

    async def run(self) -> HarvestResult:
        """Execute the full harvesting pipeline."""
        result = HarvestResult()
        result.started = time.monotonic()

        # Configuration problems surface before anything is fetched or written.
        pipeline = TransformerPipeline.from_names(self.config.extraction.transformers)
        fetcher = self._fetcher or self._create_fetcher()
        if self.config.auth.enabled and not fetcher.supports_login:
            raise ConfigurationError(
                "Login credentials were given but the HTTP fetcher cannot log in; "
                "enable JavaScript rendering"
            )

        output_root = Path(self.config.output.path)
        output_root.mkdir(parents=True, exist_ok=True)
        self.console.print(f"[blue]Output is {output_root}[/blue]")

        assembler = LibraryAssembler(
            self.config, ComponentExtractor(self.config.extraction), pipeline
        )

        async with fetcher:
            if self.config.auth.enabled:
                await self._login(fetcher)

            links = await self._discover(fetcher)
            if not links:
                self.console.print("[yellow]No component pages found.[/yellow]")

            progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeElapsedColumn(),
                console=self.console,
            )
            with progress:
                task_id = progress.add_task("Harvesting...", total=len(links))
                for discovered in links:
                    progress.update(task_id, description=discovered.url)
                    await self._process_page(discovered, fetcher, assembler, result)
                    progress.advance(task_id)

        if self.config.output.build_index and result.catalog:
            self.console.print("[blue]Building index pages...[/blue]")
            result.index_pages = IndexBuilder(output_root).build(result.catalog)

        if self.config.output.catalog_json:
            self._write_catalog_json(result.catalog, self.config.output.catalog_json)

        result.finished = time.monotonic()
        self._print_summary(result)
        return result

    async def _login(self, fetcher: BaseFetcher) -> None:
        login_url = absolute_url(self.config.root_url, self.config.auth.login_path)
        self.console.print(f"[blue]Logging into {self.config.root_url}...[/blue]")
        if not await fetcher.login(login_url, self.config.auth):
            raise FetchError("Invalid credentials", login_url)
        self.console.print("[green]Logged in[/green]")

    async def _discover(self, fetcher: BaseFetcher) -> list[DiscoveredURL]:
        listing_url = absolute_url(self.config.root_url, self.config.listing_path)
        listing = await fetcher.fetch(listing_url)
        if not listing.success:
            raise FetchError(
                f"Cannot load listing page: {listing.error or f'HTTP {listing.status_code}'}",
                listing_url,
            )

        discoverer = ListingDiscoverer(self.config.listing_selector, self.config.max_links)
        links = discoverer.discover(listing.html)
        self.console.print(f"[green]Found {len(links)} component pages[/green]")
        return links

    async def _process_page(
        self,
        discovered: DiscoveredURL,
        fetcher: BaseFetcher,
        assembler: LibraryAssembler,
        result: HarvestResult,
    ) -> None:
        """Fetch and assemble one page, then merge it into the catalog."""
        url = discovered.url
        logger.info("Processing %s", url)

        fetch_result = await fetcher.fetch(absolute_url(self.config.root_url, url))
        if not fetch_result.success:
            message = fetch_result.error or f"HTTP {fetch_result.status_code}"
            self._record_error(result, url, message, ErrorCategory.FETCH)
            return

        try:
            assembled = await assembler.assemble_page(fetch_result.html, url)
        except NavigationError as e:
            self._record_error(result, url, str(e), ErrorCategory.NAVIGATION)
            return
        except OutputError as e:
            self._record_error(result, url, str(e), ErrorCategory.OUTPUT)
            return

        result.catalog.merge(assembled.fragment)
        result.pages.append(url)
        result.written.extend(assembled.written)
        result.component_failures.extend(assembled.extraction.failures)

    def _record_error(
        self, result: HarvestResult, url: str, message: str, category: ErrorCategory
    ) -> None:
        logger.error("%s: %s", url, message)
        result.errors.append(PageError(url=url, message=message, category=category))
        if self.config.verbose:
            self.console.print(f"[red]{url}: {message}[/red]")

    def _write_catalog_json(self, catalog: Catalog, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        self.console.print(f"[green]Catalog written to {path}[/green]")

    def _create_fetcher(self) -> BaseFetcher:
        """Create the appropriate fetcher."""
        if self.config.fetcher.use_js:
            return PlaywrightFetcher(self.config.fetcher)
        return HttpFetcher(self.config.fetcher)

    def _print_summary(self, result: HarvestResult) -> None:
        """Print a post-run summary report."""
        self.console.print()
        self.console.print("[bold]Harvest complete[/bold]")
        self.console.print()

        self.console.print(f"  Pages:       [green]{result.success_count}[/green]")
        self.console.print(f"  Sections:    {result.catalog.section_count}")
        self.console.print(f"  Components:  {result.catalog.component_count}")
        if result.index_pages:
            self.console.print(f"  Index pages: {len(result.index_pages)}")
        if result.component_failures:
            self.console.print(
                f"  Skipped components: [yellow]{len(result.component_failures)}[/yellow]"
            )
        self.console.print(f"  Time:        {result.duration:.1f}s")

        if result.errors:
            self.console.print()
            category_counts: Counter[ErrorCategory] = Counter(e.category for e in result.errors)
            table = Table(title="Failed pages", show_header=True, header_style="bold")
            table.add_column("Category", style="red")
            table.add_column("Page")
            table.add_column("Error")
            for error in result.errors:
                table.add_row(error.category.value, error.url, error.message)
            self.console.print(table)
            for category, count in category_counts.most_common():
                self.console.print(f"  {category.value:<12s} {count}")

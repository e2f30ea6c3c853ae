"""Playwright-based fetcher for the authenticated browser session."""

import logging

from playwright.async_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError

from component_harvest.config import AuthConfig, FetcherConfig
from component_harvest.fetcher.base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)


class PlaywrightFetcher(BaseFetcher):
    """Fetch pages in one browser tab, keeping the login session."""

    supports_login = True

    def __init__(self, config: FetcherConfig):
        super().__init__(config)
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    async def __aenter__(self):
        """Launch the browser and open the tab used for every request."""
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self.config.headless
            )
            self._context = await self._browser.new_context(
                user_agent=self.config.user_agent,
                viewport={"width": 1280, "height": 720},
            )
            self._page = await self._context.new_page()
        except Exception:
            await self.__aexit__(None, None, None)
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up Playwright resources."""
        if self._context:
            await self._context.close()
        if self._browser:
            await self._browser.close()
        if self._playwright:
            await self._playwright.stop()

    def _require_page(self) -> Page:
        if self._page is None:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")
        return self._page

    async def login(self, login_url: str, auth: AuthConfig) -> bool:
        """Submit the login form and check the landing page title."""
        page = self._require_page()
        await page.goto(login_url, timeout=self.config.timeout_ms)
        await page.fill("input[type=email]", auth.email or "")
        await page.fill("input[type=password]", auth.password or "")
        async with page.expect_navigation(timeout=self.config.timeout_ms):
            await page.click("button[type=submit]")
        title = await page.title()
        logger.debug("Landed on %r after login", title)
        return title == auth.success_title

    async def fetch(self, url: str) -> FetchResult:
        """Load a page and return the rendered DOM."""
        page = self._require_page()
        try:
            response = await page.goto(
                url,
                wait_until="networkidle",
                timeout=self.config.timeout_ms,
            )
            if response is None:
                return FetchResult(
                    url=url,
                    final_url=url,
                    html="",
                    status_code=0,
                    error="No response received",
                )
            html = await page.content()
        except PlaywrightError as e:
            return FetchResult(url=url, final_url=url, html="", status_code=0, error=str(e))

        return FetchResult(
            url=url,
            final_url=page.url,
            html=html.strip(),
            status_code=response.status,
        )

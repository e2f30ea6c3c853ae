"""Shared fixtures: synthetic library pages and an in-memory fetcher."""

from __future__ import annotations

import html
import io
from collections.abc import Callable, Sequence

import pytest
from rich.console import Console

from component_harvest.config import AuthConfig, FetcherConfig
from component_harvest.fetcher import BaseFetcher, FetchResult

PageFactory = Callable[..., str]


def _component_html(title: str, code: str, preview: str | None) -> str:
    iframe = ""
    if preview is not None:
        iframe = f'<iframe srcdoc="{html.escape(preview, quote=True)}"></iframe>'
    return (
        '<section class="wrapper">'
        f'<div class="component"><h3>{html.escape(title)}</h3>'
        f"<div><div><textarea>\n    {html.escape(code)}\n  </textarea></div></div>"
        f"</div>{iframe}</section>"
    )


@pytest.fixture
def make_page() -> PageFactory:
    """Return a factory for component pages shaped like the library's markup.

    Components are ``(title, code)`` or ``(title, code, preview_srcdoc)``
    tuples. Code is HTML-escaped inside the textarea, the way a browser
    serializes it.
    """

    def factory(
        nav: Sequence[str] = ("Forms", "Buttons"),
        heading: str | None = "Primary buttons",
        components: Sequence[tuple[str, ...]] = (),
    ) -> str:
        links = "".join(f'<a href="#">{html.escape(label)}</a>' for label in nav)
        nav_html = f"<nav>{links}</nav>" if nav else ""
        heading_html = f"<h2>{html.escape(heading)}</h2>" if heading is not None else ""
        body = "".join(
            _component_html(item[0], item[1], item[2] if len(item) > 2 else None)
            for item in components
        )
        return (
            "<!DOCTYPE html><html><head><title>Library</title></head><body>"
            f"{nav_html}<main>{heading_html}{body}</main></body></html>"
        )

    return factory


@pytest.fixture
def buttons_page(make_page: PageFactory) -> str:
    """The two-component buttons page used across tests."""
    return make_page(
        components=[
            ("Default", '<button class="btn">Default</button>'),
            ("With icon", '<button class="btn"><svg></svg> Icon</button>'),
        ]
    )


class FakeFetcher(BaseFetcher):
    """Serve pages from a dict keyed by absolute URL."""

    supports_login = True

    def __init__(self, pages: dict[str, str], *, login_ok: bool = True):
        super().__init__(FetcherConfig())
        self.pages = pages
        self.login_ok = login_ok
        self.requested: list[str] = []
        self.logins: list[str] = []
        self.entered = False
        self.closed = False

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url not in self.pages:
            return FetchResult(url=url, final_url=url, html="", status_code=404)
        return FetchResult(url=url, final_url=url, html=self.pages[url], status_code=200)

    async def login(self, login_url: str, auth: AuthConfig) -> bool:
        self.logins.append(login_url)
        return self.login_ok


@pytest.fixture
def make_fetcher() -> Callable[..., FakeFetcher]:
    """Return a factory for in-memory fetchers."""
    return FakeFetcher


@pytest.fixture
def quiet_console() -> Console:
    """A console that writes to memory instead of the terminal."""
    return Console(file=io.StringIO(), width=120)

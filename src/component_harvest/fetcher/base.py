"""Base class for page fetchers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from component_harvest.config import AuthConfig, FetcherConfig


class FetchResult(BaseModel):
    """Result of fetching a page."""

    url: str
    final_url: str  # After redirects
    html: str
    status_code: int
    error: str | None = None

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 400 and not self.error


class BaseFetcher(ABC):
    """Abstract base class for page fetchers.

    Fetchers are used by a single sequential run: one request at a time.
    """

    supports_login: bool = False

    def __init__(self, config: FetcherConfig):
        self.config = config

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page and return its HTML content."""

    async def login(self, login_url: str, auth: AuthConfig) -> bool:
        """Sign in to the site. Returns True when the session is authenticated."""
        raise NotImplementedError(f"{type(self).__name__} cannot log in")

    @abstractmethod
    async def __aenter__(self):
        """Async context manager entry."""

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""

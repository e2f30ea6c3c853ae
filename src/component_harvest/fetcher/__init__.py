"""Page fetching with optional JavaScript rendering."""

from component_harvest.fetcher.base import BaseFetcher, FetchResult
from component_harvest.fetcher.http_fetcher import HttpFetcher
from component_harvest.fetcher.playwright_fetcher import PlaywrightFetcher

__all__ = [
    "BaseFetcher",
    "FetchResult",
    "PlaywrightFetcher",
    "HttpFetcher",
]

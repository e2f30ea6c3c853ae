"""Exception types raised by the harvesting pipeline."""

from pathlib import Path


class HarvestError(Exception):
    """Base class for all harvesting errors."""


class ConfigurationError(HarvestError, ValueError):
    """Invalid configuration, detected before any page is fetched."""


class FetchError(HarvestError):
    """A page could not be fetched, or the login was rejected."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class NavigationError(HarvestError):
    """A page is missing the navigation labels needed to place it in the catalog."""

    def __init__(self, message: str, url: str):
        super().__init__(f"{message} (page: {url})")
        self.url = url


class ExtractionError(HarvestError):
    """A single component could not be extracted from its page."""

    def __init__(self, message: str, url: str, title: str | None = None):
        label = f"'{title}'" if title else "untitled component"
        super().__init__(f"{label} on {url}: {message}")
        self.url = url
        self.title = title


class OutputError(HarvestError):
    """A component file or directory could not be written."""

    def __init__(self, message: str, url: str, path: Path):
        super().__init__(f"{message}: {path} (page: {url})")
        self.url = url
        self.path = path

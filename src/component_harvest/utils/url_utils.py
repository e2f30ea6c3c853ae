"""URL manipulation utilities."""

from urllib.parse import urljoin, urlparse


def page_path(href: str) -> str:
    """Reduce a link to its path, without trailing slash or fragment."""
    path = urlparse(href).path.rstrip("/")
    if path and not path.startswith("/"):
        path = "/" + path
    return path


def absolute_url(root_url: str, path: str) -> str:
    """Resolve a site path against the root URL."""
    return urljoin(root_url.rstrip("/") + "/", path.lstrip("/"))

"""Discovery of component pages from the library's listing page."""

from component_harvest.discovery.listing import DiscoveredURL, ListingDiscoverer

__all__ = [
    "DiscoveredURL",
    "ListingDiscoverer",
]

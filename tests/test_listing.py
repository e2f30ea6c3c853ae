"""Tests for reading component page links from the listing page."""

from __future__ import annotations

from component_harvest.discovery import ListingDiscoverer

LISTING = """
<html><body>
  <header><a href="/pricing">Pricing</a></header>
  <div class="grid">
    <a href="/components/marketing/heroes">Heroes</a>
    <a href="https://tailwindui.com/components/forms/buttons/">Buttons</a>
    <a href="">Empty</a>
    <a>No href</a>
    <a href="/components/forms/inputs#top">Inputs</a>
  </div>
</body></html>
"""


def test_discovers_grid_links_in_order() -> None:
    """Only grid links count; hrefs are reduced to clean paths."""
    links = ListingDiscoverer().discover(LISTING)
    assert [link.url for link in links] == [
        "/components/marketing/heroes",
        "/components/forms/buttons",
        "/components/forms/inputs",
    ]
    assert [link.title for link in links] == ["Heroes", "Buttons", "Inputs"]


def test_max_links_caps_discovery() -> None:
    """A positive limit keeps the first links only."""
    links = ListingDiscoverer(max_links=2).discover(LISTING)
    assert [link.url for link in links] == [
        "/components/marketing/heroes",
        "/components/forms/buttons",
    ]


def test_custom_selector() -> None:
    """The link selector is configurable."""
    links = ListingDiscoverer(selector="header a").discover(LISTING)
    assert [link.url for link in links] == ["/pricing"]

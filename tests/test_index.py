"""Tests for rendering index pages from a catalog."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup

from component_harvest.library import Catalog, IndexBuilder
from component_harvest.utils.paths import component_hash


def _section(page: str, *titles: str) -> dict:
    return {
        "url": f"{page}/index.html",
        "components": [
            {
                "hash": component_hash(f"{page}/{t.lower()}"),
                "title": t,
                "url": f"{page}/{t.lower()}.html",
            }
            for t in titles
        ],
    }


def _catalog() -> Catalog:
    catalog = Catalog()
    catalog.merge(
        {"Forms": {"Buttons": {"Primary buttons": _section("/components/buttons", "Default", "Wide")}}}
    )
    catalog.merge(
        {"<Layout>": {"Grids": {"Simple grids": _section("/components/layout/grids", "Basic")}}}
    )
    return catalog


def test_library_index_lists_sections(tmp_path: Path) -> None:
    """The root index mirrors category, subcategory and section levels."""
    written = IndexBuilder(tmp_path).build(_catalog())

    index = tmp_path / "index.html"
    assert written[0] == index
    soup = BeautifulSoup(index.read_text(encoding="utf-8"), "html.parser")

    assert [h.get_text() for h in soup.find_all("h2")] == ["Forms", "<Layout>"]
    assert [h.get_text() for h in soup.find_all("h3")] == ["Buttons", "Grids"]
    links = {a.get_text(): a["href"] for a in soup.find_all("a")}
    assert links == {
        "Primary buttons": "components/buttons/index.html",
        "Simple grids": "components/layout/grids/index.html",
    }
    assert "3 components in 2 sections" in soup.get_text()


def test_labels_are_escaped(tmp_path: Path) -> None:
    """Catalog labels are HTML-escaped in rendered pages."""
    IndexBuilder(tmp_path).build(_catalog())
    assert "&lt;Layout&gt;" in (tmp_path / "index.html").read_text(encoding="utf-8")


def test_section_pages_link_components(tmp_path: Path) -> None:
    """Each section page links its components relative to itself."""
    written = IndexBuilder(tmp_path, title="My Library").build(_catalog())

    page = tmp_path / "components" / "buttons" / "index.html"
    assert page in written
    assert len(written) == 3
    soup = BeautifulSoup(page.read_text(encoding="utf-8"), "html.parser")

    items = soup.find_all("li")
    assert [li["id"] for li in items] == [
        component_hash("/components/buttons/default"),
        component_hash("/components/buttons/wide"),
    ]
    assert [li.find("a")["href"] for li in items] == ["default.html", "wide.html"]
    assert soup.find("nav").find("a")["href"] == "../../index.html"
    assert soup.find("title").get_text() == "Primary buttons · My Library"


def test_build_does_not_change_catalog(tmp_path: Path) -> None:
    """Rendering only reads the catalog."""
    catalog = _catalog()
    before = catalog.to_dict()
    IndexBuilder(tmp_path).build(catalog)
    assert catalog.to_dict() == before


def test_section_page_never_replaces_a_component_file(tmp_path: Path) -> None:
    """A component titled "Index" keeps its file; the section page is skipped."""
    catalog = _catalog()
    catalog.merge(
        {"Forms": {"Inputs": {"Input groups": _section("/components/inputs", "Index", "Plain")}}}
    )
    component_file = tmp_path / "components" / "inputs" / "index.html"
    component_file.parent.mkdir(parents=True)
    component_file.write_text("<b>component body</b>", encoding="utf-8")

    written = IndexBuilder(tmp_path).build(catalog)

    assert component_file.read_text(encoding="utf-8") == "<b>component body</b>"
    assert component_file not in written
    assert tmp_path / "components" / "buttons" / "index.html" in written

    soup = BeautifulSoup((tmp_path / "index.html").read_text(encoding="utf-8"), "html.parser")
    assert "Input groups" not in [a.get_text() for a in soup.find_all("a")]
    assert "Input groups (2)" in soup.get_text()

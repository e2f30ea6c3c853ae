"""Transformers shipped with the harvester."""

from bs4 import BeautifulSoup, Comment

from component_harvest.transformers.base import TransformContext, Transformer

TAILWIND_UI_CSS = "https://unpkg.com/@tailwindcss/ui/dist/tailwind-ui.min.css"
INTER_CSS = "https://rsms.me/inter/inter.css"


def prefix_src(document: BeautifulSoup, context: TransformContext) -> None:
    """Point root-relative ``src`` and ``href`` attributes at the source site."""
    root = context.root_url.rstrip("/")
    for attr in ("src", "href"):
        for tag in document.find_all(attrs={attr: True}):
            value = tag[attr]
            if value.startswith("/") and not value.startswith("//"):
                tag[attr] = root + value


def _prepend_stylesheet(document: BeautifulSoup, href: str) -> None:
    link = document.new_tag("link", href=href, rel="stylesheet")
    document.insert(0, "\n")
    document.insert(0, link)


def add_tailwind_css(document: BeautifulSoup, context: TransformContext) -> None:
    """Make the component render standalone with the Tailwind UI stylesheet."""
    _prepend_stylesheet(document, TAILWIND_UI_CSS)


def use_inter(document: BeautifulSoup, context: TransformContext) -> None:
    """Load the Inter font and make it the default sans-serif face."""
    style = document.new_tag("style")
    style.string = "html { font-family: 'Inter var', sans-serif; }"
    document.insert(0, "\n")
    document.insert(0, style)
    _prepend_stylesheet(document, INTER_CSS)


def strip_comments(document: BeautifulSoup, context: TransformContext) -> None:
    """Drop HTML comments."""
    for comment in document.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()


BUILTIN_TRANSFORMERS: dict[str, Transformer] = {
    "prefix_src": prefix_src,
    "add_tailwind_css": add_tailwind_css,
    "use_inter": use_inter,
    "strip_comments": strip_comments,
}

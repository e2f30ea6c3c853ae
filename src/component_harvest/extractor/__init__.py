"""Component extraction from library pages."""

from component_harvest.extractor.components import (
    ComponentExtractor,
    PageExtraction,
    RawComponent,
)

__all__ = [
    "ComponentExtractor",
    "PageExtraction",
    "RawComponent",
]

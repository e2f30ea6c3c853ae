"""Utility functions."""

from component_harvest.utils.paths import component_hash, require_segment, sanitize
from component_harvest.utils.url_utils import absolute_url, page_path

__all__ = [
    "absolute_url",
    "component_hash",
    "page_path",
    "require_segment",
    "sanitize",
]

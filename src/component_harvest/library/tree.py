"""Deep merge of nested catalog fragments.

A catalog is a plain JSON-like tree, three levels of mappings deep
(category, subcategory, section) with a section record at each leaf.
Fragments built for a single page are folded into the running catalog with
:func:`merge_tree`:

- two sequences at the same key are concatenated, existing items first;
- two mappings at the same key are merged recursively into a copy of the
  existing branch;
- anything else is overwritten by the newer value.

Merging the same section twice therefore lists its components twice. That
is the defined behavior; components are not deduplicated by hash.
"""

import copy
from collections.abc import Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Any

from component_harvest.library.models import Section


class NodeKind(str, Enum):
    """Shape of a value inside a catalog tree."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


_MISSING = object()


def node_kind(value: Any) -> NodeKind:
    """Classify a tree value."""
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def merge_tree(target: Any, source: Any) -> Any:
    """Merge ``source`` into ``target`` and return the result.

    ``target`` is updated in place when both arguments are mappings; nested
    branches of either argument are never mutated. When either side is not
    a mapping, ``source`` wins outright.
    """
    if node_kind(target) is not NodeKind.MAPPING or node_kind(source) is not NodeKind.MAPPING:
        return source

    for key, source_value in source.items():
        target[key] = _merge_value(target.get(key, _MISSING), source_value)
    return target


def _merge_value(target_value: Any, source_value: Any) -> Any:
    kinds = (node_kind(target_value), node_kind(source_value))

    if kinds == (NodeKind.SEQUENCE, NodeKind.SEQUENCE):
        return [*target_value, *copy.deepcopy(list(source_value))]
    if kinds == (NodeKind.MAPPING, NodeKind.MAPPING):
        return merge_tree(dict(target_value), source_value)
    # Scalars, missing keys and type mismatches: the newer value wins.
    return copy.deepcopy(source_value)


class Catalog:
    """Category -> subcategory -> section tree of harvested components."""

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data: MutableMapping[str, Any] = {}
        if data:
            self.merge(data)

    def merge(self, fragment: Mapping[str, Any]) -> None:
        """Fold a page fragment into the catalog."""
        merge_tree(self._data, fragment)

    def sections(self) -> Iterator[tuple[str, str, str, Section]]:
        """Yield ``(category, subcategory, section name, section)`` entries."""
        for category, subcategories in self._data.items():
            for subcategory, sections in subcategories.items():
                for name, section in sections.items():
                    yield category, subcategory, name, Section.model_validate(section)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the underlying tree."""
        return copy.deepcopy(dict(self._data))

    @property
    def section_count(self) -> int:
        return sum(1 for _ in self.sections())

    @property
    def component_count(self) -> int:
        return sum(len(section.components) for *_, section in self.sections())

    def __bool__(self) -> bool:
        return bool(self._data)

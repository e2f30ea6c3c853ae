"""Assembly of harvested components into a catalog and library files."""

from component_harvest.library.assembler import AssembledPage, LibraryAssembler
from component_harvest.library.index import IndexBuilder
from component_harvest.library.models import Component, Section
from component_harvest.library.tree import Catalog, NodeKind, merge_tree, node_kind

__all__ = [
    "AssembledPage",
    "Catalog",
    "Component",
    "IndexBuilder",
    "LibraryAssembler",
    "NodeKind",
    "Section",
    "merge_tree",
    "node_kind",
]

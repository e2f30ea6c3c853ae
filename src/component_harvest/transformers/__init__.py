"""Pluggable transformations applied to each component's markup."""

from component_harvest.transformers.base import TransformContext, Transformer
from component_harvest.transformers.pipeline import TransformerPipeline
from component_harvest.transformers.registry import TransformerRegistry

__all__ = [
    "TransformContext",
    "Transformer",
    "TransformerPipeline",
    "TransformerRegistry",
]

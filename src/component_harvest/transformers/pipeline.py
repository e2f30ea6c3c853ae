"""Ordered application of transformers to component markup."""

from collections.abc import Iterable, Sequence

from bs4 import BeautifulSoup

from component_harvest.transformers.base import TransformContext, Transformer
from component_harvest.transformers.registry import TransformerRegistry


class TransformerPipeline:
    """Run a fixed sequence of transformers over component markup."""

    def __init__(self, transformers: Sequence[Transformer] = ()):
        self.transformers = tuple(transformers)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "TransformerPipeline":
        """Build a pipeline from names, reporting every unresolvable one together."""
        return cls(TransformerRegistry.resolve(names))

    def apply(self, code: str, context: TransformContext) -> str:
        """Transform ``code`` and return the serialized result.

        Each transformer is called exactly once, in order, on the same
        document. Markup passes through untouched when there is nothing to
        apply.
        """
        if not self.transformers:
            return code

        # html.parser keeps fragments as fragments (no <html>/<body> wrapper).
        document = BeautifulSoup(code, "html.parser")
        for transformer in self.transformers:
            transformer(document, context)
        return document.decode()

    def __len__(self) -> int:
        return len(self.transformers)

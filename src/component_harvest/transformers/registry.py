"""Name-based lookup of transformers."""

import importlib
import logging
from collections.abc import Iterable

from component_harvest.errors import ConfigurationError
from component_harvest.transformers.base import Transformer
from component_harvest.transformers.builtin import BUILTIN_TRANSFORMERS

logger = logging.getLogger(__name__)


class TransformerRegistry:
    """Registry of transformers by name.

    Besides registered names, ``package.module:function`` references are
    imported on demand so projects can ship their own transformers.
    """

    _transformers: dict[str, Transformer] = dict(BUILTIN_TRANSFORMERS)

    @classmethod
    def register(cls, name: str, transformer: Transformer) -> None:
        """Register a transformer under ``name``."""
        cls._transformers[name] = transformer

    @classmethod
    def get(cls, name: str) -> Transformer | None:
        """Look up a transformer by registered name or import reference."""
        if name in cls._transformers:
            return cls._transformers[name]
        if ":" in name:
            return cls._import(name)
        return None

    @classmethod
    def list_names(cls) -> list[str]:
        """List registered transformer names."""
        return sorted(cls._transformers)

    @classmethod
    def resolve(cls, names: Iterable[str]) -> list[Transformer]:
        """Resolve every name, in order, or raise ConfigurationError."""
        resolved: list[Transformer] = []
        unknown: list[str] = []
        for name in names:
            transformer = cls.get(name)
            if transformer is None:
                unknown.append(name)
            else:
                resolved.append(transformer)
        if unknown:
            raise ConfigurationError(
                f"Unknown transformer(s): {', '.join(unknown)}. "
                f"Available: {', '.join(cls.list_names())}"
            )
        return resolved

    @staticmethod
    def _import(reference: str) -> Transformer | None:
        module_name, _, attr = reference.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            logger.debug("Cannot import transformer module %s", module_name, exc_info=True)
            return None
        transformer = getattr(module, attr, None)
        if not callable(transformer):
            return None
        return transformer

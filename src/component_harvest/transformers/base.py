"""The transformer contract."""

from pathlib import Path
from typing import Protocol

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict


class TransformContext(BaseModel):
    """Read-only details about the component being transformed."""

    model_config = ConfigDict(frozen=True)

    root_url: str
    output_root: Path
    title: str
    logical_path: str


class Transformer(Protocol):
    """A named rewrite of a component's markup.

    Transformers edit ``document`` in place and return nothing. They may read
    ``context`` but must not depend on any other state, so the same input
    always produces the same output.
    """

    def __call__(self, document: BeautifulSoup, context: TransformContext) -> None:
        ...

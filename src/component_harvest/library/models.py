"""Records stored in the component catalog."""

from pydantic import BaseModel, Field


class Component(BaseModel):
    """One harvested component, as listed in its section."""

    hash: str
    title: str
    url: str


class Section(BaseModel):
    """Components grouped under one page heading."""

    url: str
    components: list[Component] = Field(default_factory=list)

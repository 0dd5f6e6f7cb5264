"""Edge and node record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# The root carries no tissue, main type or color of its own.
DEFAULT_TISSUE = "tissue"
DEFAULT_MAIN_TYPE = "tissue"
DEFAULT_COLOR = "Black"


class Edge(BaseModel):
    """A directed parent -> child relationship, serialized as ``from``/``to``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_code: str = Field(..., alias="from")
    to_code: str = Field(..., alias="to")


class NodeRecord(BaseModel):
    """Per-node attributes keyed by ``code``."""

    model_config = ConfigDict(frozen=True)

    code: str
    description: str
    tissue: str = DEFAULT_TISSUE
    main_type: str = DEFAULT_MAIN_TYPE
    color: str = DEFAULT_COLOR
    level: int

"""Tree node view model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TreeNode(BaseModel):
    """A read-only view over one entry of the source ontology.

    ``children`` holds the raw child payloads keyed by code. Use
    ``TreeDocument.children`` to obtain validated child views.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    name: str = ""
    tissue: str | None = None
    main_type: str | None = None
    color: str | None = None
    level: int
    children: dict[str, Any] = Field(default_factory=dict, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

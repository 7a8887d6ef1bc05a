from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TreeNodeModel(BaseModel):
    id: str
    name: str
    subclasses: List["TreeNodeModel"] = Field(default_factory=list)


class DiscardedEdgeModel(BaseModel):
    child_id: str
    parent_id: str
    position: int


class HierarchyDiagnostics(BaseModel):
    term_count: int = 0
    skipped_blocks: int = 0
    discarded_edges: List[DiscardedEdgeModel] = Field(default_factory=list)


class RootClassesResponse(BaseModel):
    success: bool = True
    classes: List[str]


class SubclassesResponse(BaseModel):
    """Documented shape of the subclasses endpoint; the body is encoded by ``iter_json``."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    class_name: str = Field(alias="class")
    subclasses: List[TreeNodeModel] = Field(default_factory=list)
    diagnostics: HierarchyDiagnostics = Field(default_factory=HierarchyDiagnostics)


class HealthResponse(BaseModel):
    status: str
    obo_file: str
    obo_available: bool


__all__ = [
    "DiscardedEdgeModel",
    "HealthResponse",
    "HierarchyDiagnostics",
    "RootClassesResponse",
    "SubclassesResponse",
    "TreeNodeModel",
]

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ontology_api.models.term import DiscardedParentEdge, TreeNode
from ontology_api.obo.extractor import TermExtractor
from ontology_api.obo.indexes import build_child_index, build_parent_index
from ontology_api.obo.root_scanner import ROOT_CLASSES, is_root_class
from ontology_api.obo.tree_builder import HierarchyTreeBuilder

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HierarchyResult:
    """Subtree below a root class together with parsing diagnostics."""

    class_name: str
    subclasses: List[TreeNode] = field(default_factory=list)
    term_count: int = 0
    skipped_blocks: int = 0
    discarded_edges: List[DiscardedParentEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"subclasses": [node.to_dict() for node in self.subclasses]}

    def diagnostics(self) -> Dict[str, Any]:
        return {
            "term_count": self.term_count,
            "skipped_blocks": self.skipped_blocks,
            "discarded_edges": [
                {"child_id": edge.child_id, "parent_id": edge.parent_id, "position": edge.position}
                for edge in self.discarded_edges
            ],
        }


class HierarchyQuery:
    """Entry point turning raw OBO text into the subtree of one root class."""

    def __init__(self, extractor: TermExtractor | None = None) -> None:
        self.extractor = extractor or TermExtractor()

    def run(self, text: str, class_name: str) -> HierarchyResult | None:
        """Return the subclasses of ``class_name`` or ``None`` for an unknown class.

        Raises ``CyclicHierarchyError`` when the parent chain below the root
        loops back on itself.
        """

        if not is_root_class(class_name):
            logger.debug("Rejected hierarchy query for %r; expected one of %s", class_name, ROOT_CLASSES)
            return None

        extraction = self.extractor.extract(text)
        parent_index = build_parent_index(extraction.terms)
        child_index = build_child_index(parent_index.parents)
        root = HierarchyTreeBuilder(extraction.terms, child_index).build(class_name)

        return HierarchyResult(
            class_name=class_name,
            subclasses=root.subclasses,
            term_count=len(extraction.terms),
            skipped_blocks=extraction.skipped_blocks,
            discarded_edges=parent_index.discarded_edges,
        )


def query_subclass_hierarchy(text: str, class_name: str) -> HierarchyResult | None:
    return HierarchyQuery().run(text, class_name)


__all__ = ["HierarchyQuery", "HierarchyResult", "query_subclass_hierarchy"]

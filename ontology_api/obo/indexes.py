from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from ontology_api.models.term import DiscardedParentEdge, Term

logger = logging.getLogger(__name__)

ParentIndex = Dict[str, str]
ChildIndex = Dict[str, List[str]]


@dataclass(slots=True)
class ParentIndexResult:
    """Primary parent per term and the secondary ``is_a`` edges left out."""

    parents: ParentIndex = field(default_factory=dict)
    discarded_edges: List[DiscardedParentEdge] = field(default_factory=list)


def build_parent_index(terms: Mapping[str, Term]) -> ParentIndexResult:
    """Map every term to its first declared parent.

    Only the primary parent is kept so the result is always a forest. Every
    other parent reference is recorded in ``discarded_edges``. Parents are not
    required to exist in ``terms``.
    """

    result = ParentIndexResult()
    for term in terms.values():
        if not term.parent_ids:
            continue
        result.parents[term.id] = term.primary_parent
        for position, parent_id in enumerate(term.parent_ids[1:], start=1):
            result.discarded_edges.append(
                DiscardedParentEdge(child_id=term.id, parent_id=parent_id, position=position)
            )

    if result.discarded_edges:
        logger.debug(
            "Discarded %d non-primary parent edges across %d terms",
            len(result.discarded_edges),
            len({edge.child_id for edge in result.discarded_edges}),
        )
    return result


def build_child_index(parents: Mapping[str, str]) -> ChildIndex:
    """Invert a parent index, keeping the parent index iteration order."""

    children: ChildIndex = {}
    for child_id, parent_id in parents.items():
        children.setdefault(parent_id, []).append(child_id)
    return children


__all__ = [
    "ChildIndex",
    "ParentIndex",
    "ParentIndexResult",
    "build_child_index",
    "build_parent_index",
]

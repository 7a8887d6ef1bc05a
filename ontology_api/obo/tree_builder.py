from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Sequence, Tuple

from ontology_api.models.term import Term, TreeNode
from ontology_api.obo.collation import collation_key

logger = logging.getLogger(__name__)


class HierarchyError(ValueError):
    """Base class for hierarchy construction failures."""


class CyclicHierarchyError(HierarchyError):
    """Raised when a term is reached again below itself."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Cyclic hierarchy: " + " -> ".join(self.cycle))


class HierarchyTreeBuilder:
    """Materialize the subclass tree below a root id.

    Children are visited in child index order and each sibling list is then
    sorted by name, so equal names keep that order. Traversal uses an explicit
    stack; the ids on the current root-to-node path are tracked and seeing one
    of them again raises ``CyclicHierarchyError``.
    """

    def __init__(self, terms: Mapping[str, Term], children: Mapping[str, Sequence[str]]) -> None:
        self.terms = terms
        self.children = children

    def name_for(self, term_id: str) -> str:
        term = self.terms.get(term_id)
        return term.name if term else term_id

    def build(self, root_id: str) -> TreeNode:
        root = TreeNode(id=root_id, name=self.name_for(root_id))
        stack: List[Tuple[TreeNode, Iterator[str]]] = [(root, self._child_ids(root_id))]
        on_path = {root_id}
        node_count = 1

        while stack:
            node, pending = stack[-1]
            child_id = next(pending, None)
            if child_id is None:
                stack.pop()
                on_path.discard(node.id)
                node.subclasses.sort(key=lambda child: collation_key(child.name))
                continue

            if child_id in on_path:
                path = [frame_node.id for frame_node, _ in stack]
                start = path.index(child_id)
                raise CyclicHierarchyError(path[start:] + [child_id])

            child = TreeNode(id=child_id, name=self.name_for(child_id))
            node.subclasses.append(child)
            on_path.add(child_id)
            stack.append((child, self._child_ids(child_id)))
            node_count += 1

        logger.debug("Built hierarchy for %s with %d nodes", root_id, node_count)
        return root

    def _child_ids(self, term_id: str) -> Iterator[str]:
        return iter(self.children.get(term_id, ()))


__all__ = ["CyclicHierarchyError", "HierarchyError", "HierarchyTreeBuilder"]

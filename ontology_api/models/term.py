from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(slots=True, frozen=True)
class Term:
    """A single vocabulary entry extracted from a ``[Term]`` block."""

    id: str
    name: str
    parent_ids: Tuple[str, ...] = ()

    @property
    def primary_parent(self) -> str | None:
        return self.parent_ids[0] if self.parent_ids else None


@dataclass(slots=True, frozen=True)
class DiscardedParentEdge:
    """A non-primary ``is_a`` reference that was dropped from the tree."""

    child_id: str
    parent_id: str
    position: int


@dataclass(slots=True)
class TreeNode:
    """Node of a materialized subclass tree."""

    id: str
    name: str
    subclasses: List["TreeNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict of this subtree, built without recursion."""

        root = {"id": self.id, "name": self.name, "subclasses": []}
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for child in node.subclasses:
                child_out = {"id": child.id, "name": child.name, "subclasses": []}
                out["subclasses"].append(child_out)
                stack.append((child, child_out))
        return root

    def iter_nodes(self):
        """Yield this node and every descendant, depth first."""

        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.subclasses))


__all__ = ["DiscardedParentEdge", "Term", "TreeNode"]

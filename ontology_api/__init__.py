"""OBO subclass hierarchy package."""

from .models.term import Term, TreeNode
from .obo.query import HierarchyResult, query_subclass_hierarchy

__all__ = ["Term", "TreeNode", "HierarchyResult", "query_subclass_hierarchy"]

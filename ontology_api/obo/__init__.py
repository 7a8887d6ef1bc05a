"""Parsing and tree construction for OBO-style term lists."""

from .identifiers import normalize_id
from .extractor import ExtractionResult, TermExtractor, TermTable, extract_terms
from .indexes import ChildIndex, ParentIndex, ParentIndexResult, build_child_index, build_parent_index
from .tree_builder import CyclicHierarchyError, HierarchyError, HierarchyTreeBuilder
from .root_scanner import ROOT_CLASSES, is_root_class, scan_root_classes
from .query import HierarchyQuery, HierarchyResult, query_subclass_hierarchy

__all__ = [
    "ROOT_CLASSES",
    "ChildIndex",
    "CyclicHierarchyError",
    "ExtractionResult",
    "HierarchyError",
    "HierarchyQuery",
    "HierarchyResult",
    "HierarchyTreeBuilder",
    "ParentIndex",
    "ParentIndexResult",
    "TermExtractor",
    "TermTable",
    "build_child_index",
    "build_parent_index",
    "extract_terms",
    "is_root_class",
    "normalize_id",
    "query_subclass_hierarchy",
    "scan_root_classes",
]

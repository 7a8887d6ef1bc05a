"""Ontology endpoints backed by an OBO file on disk."""

from .router import router, get_obo_source
from .source import OboFileSource, OboSourceError

__all__ = ["router", "get_obo_source", "OboFileSource", "OboSourceError"]

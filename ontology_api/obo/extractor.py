from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List

from ontology_api.models.term import Term
from ontology_api.obo.identifiers import normalize_id

logger = logging.getLogger(__name__)


_BLOCK_SEPARATOR = re.compile(r"\[Term\][ \t\r]*\n")
_ID_PATTERN = re.compile(r"^id:[ \t]*(?P<value>\S+)", re.MULTILINE)
_NAME_PATTERN = re.compile(r"^name:[ \t]*(?P<value>.+?)[ \t\r]*$", re.MULTILINE)
_IS_A_PATTERN = re.compile(r"^is_a:[ \t]*(?P<value>[^!\n]*?)[ \t\r]*(?:!|$)", re.MULTILINE)

TermTable = Dict[str, Term]


@dataclass(slots=True)
class ExtractionResult:
    """Terms extracted from a document plus the number of blocks dropped."""

    terms: TermTable = field(default_factory=dict)
    skipped_blocks: int = 0
    block_count: int = 0


class TermExtractor:
    """Split OBO-style text into ``[Term]`` blocks and read id/name/is_a fields.

    Parsing is best-effort: a block without an ``id:`` line is skipped and only
    counted. When two blocks share an id the later one wins.
    """

    def extract(self, text: str) -> ExtractionResult:
        result = ExtractionResult()
        # Anything before the first marker is header material.
        blocks = _BLOCK_SEPARATOR.split(text)[1:]
        result.block_count = len(blocks)

        for index, block in enumerate(blocks):
            term = self.parse_block(block)
            if term is None:
                result.skipped_blocks += 1
                logger.debug("Skipping term block %d: no id line", index)
                continue
            if term.id in result.terms:
                logger.debug("Term %s redefined in block %d; keeping the later definition", term.id, index)
            result.terms[term.id] = term

        if result.skipped_blocks:
            logger.debug("Skipped %d of %d term blocks", result.skipped_blocks, result.block_count)
        return result

    def parse_block(self, block: str) -> Term | None:
        id_match = _ID_PATTERN.search(block)
        if not id_match:
            return None
        term_id = normalize_id(id_match.group("value").strip())

        name_match = _NAME_PATTERN.search(block)
        name = name_match.group("value").strip() if name_match else term_id

        parent_ids: List[str] = []
        for match in _IS_A_PATTERN.finditer(block):
            value = match.group("value").strip()
            if value:
                parent_ids.append(normalize_id(value))

        return Term(id=term_id, name=name, parent_ids=tuple(parent_ids))


def extract_terms(text: str) -> TermTable:
    """Convenience wrapper returning only the term table."""

    return TermExtractor().extract(text).terms


__all__ = ["ExtractionResult", "TermExtractor", "TermTable", "extract_terms"]

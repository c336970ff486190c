"""
Ranking of scored tools with deterministic tie-breaking.

Sort order (first rule that distinguishes two candidates decides):
1. BM25 score, descending (scores within SCORE_EPSILON are tied)
2. Name match before description-only match
3. More matched terms found in the tool name
4. Shorter tool name (more focused tool), measured in code points
5. "server/name" ascending (total order for fully tied candidates), by code point
   rather than locale collation
"""

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, List, Sequence

from .bm25.scorer import ScoredDocument

logger = logging.getLogger(__name__)

# Scores closer than this are considered tied (floating-point jitter)
SCORE_EPSILON = 0.001


@dataclass
class RankedCandidate:
    """Scored tool plus the tie-break fields used for ordering"""
    server: str
    tool: Any
    score: float
    matched_tokens: List[str] = field(default_factory=list)
    has_name_match: bool = False
    name_match_count: int = 0
    name_length: int = 0

    @property
    def path(self) -> str:
        return f"{self.server}/{self.tool.name}"

    @classmethod
    def from_scored(
        cls,
        server: str,
        tool: Any,
        scored: ScoredDocument,
        name_tokens: Sequence[str]
    ) -> "RankedCandidate":
        """
        Build a candidate and compute its tie-break fields.
        
        Args:
            server: Server identifier
            tool: Tool descriptor (must have a .name)
            scored: BM25 result for the tool's document
            name_tokens: Tokenized tool name
        """
        name_terms = set(name_tokens)
        name_matches = [t for t in scored.matched_tokens if t in name_terms]
        return cls(
            server=server,
            tool=tool,
            score=scored.score,
            matched_tokens=list(scored.matched_tokens),
            has_name_match=bool(name_matches),
            name_match_count=len(name_matches),
            name_length=len(tool.name),
        )


def compare_candidates(a: RankedCandidate, b: RankedCandidate) -> int:
    """Comparator for sorting: negative when a ranks before b."""
    if abs(b.score - a.score) > SCORE_EPSILON:
        return -1 if a.score > b.score else 1

    if a.has_name_match != b.has_name_match:
        return -1 if a.has_name_match else 1

    if a.name_match_count != b.name_match_count:
        return b.name_match_count - a.name_match_count

    if a.name_length != b.name_length:
        return a.name_length - b.name_length

    a_path, b_path = a.path, b.path
    if a_path == b_path:
        return 0
    return -1 if a_path < b_path else 1


def rank(
    candidates: Sequence[RankedCandidate],
    threshold: float,
    limit: int
) -> List[RankedCandidate]:
    """
    Filter, sort and truncate scored candidates.
    
    Args:
        candidates: Scored tools (any order)
        threshold: Minimum score to keep (inclusive)
        limit: Maximum number of results (0 = none)
        
    Returns:
        At most `limit` candidates, best first
        
    Example:
        >>> ranked = rank(candidates, threshold=0.3, limit=10)
        >>> [c.path for c in ranked]
        ['fs/read_file', 'fs/write_file']
    """
    if limit <= 0:
        return []

    kept = [c for c in candidates if c.score >= threshold]
    kept.sort(key=cmp_to_key(compare_candidates))

    logger.debug(f"Ranked {len(kept)}/{len(candidates)} candidates above threshold {threshold}")

    return kept[:limit]

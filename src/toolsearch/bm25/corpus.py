"""
Corpus statistics for BM25 scoring.

Built once per search call from the tokenized catalog:
- num_docs: number of documents
- average_length(): mean token count (0.0 for an empty corpus)
- document_frequency(term): number of documents containing the term at least once

Document frequencies come from a per-call inverted count instead of scanning
every document for every query term. Values are identical to the full scan.
"""

import logging
import math
from collections import Counter
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


def calculate_idf(num_docs: int, doc_freq: int) -> float:
    """
    Smoothed IDF: ln((N - df + 0.5) / (df + 0.5) + 1)
    
    The +1 inside the logarithm keeps IDF strictly positive, even for terms
    present in every document.
    
    Args:
        num_docs: Total number of documents (N)
        doc_freq: Number of documents containing the term (df)
    
    Returns:
        IDF weight (> 0)
    
    Example:
        >>> round(calculate_idf(3, 1), 4)
        0.9808
    """
    return math.log((num_docs - doc_freq + 0.5) / (doc_freq + 0.5) + 1)


class CorpusStatistics:
    """
    Snapshot of corpus-level statistics for one search call.
    
    Documents are copied at construction, so mutating the caller's token
    lists afterwards does not change the statistics.
    """
    
    def __init__(self, documents: Sequence[Sequence[str]]):
        """
        Args:
            documents: Token sequences, one per catalog entry
        """
        self._lengths: List[int] = [len(doc) for doc in documents]
        self._doc_freq: Dict[str, int] = Counter()
        
        for doc in documents:
            # Presence, not count
            self._doc_freq.update(set(doc))
        
        self.num_docs = len(self._lengths)
        self._avg_length = (
            sum(self._lengths) / self.num_docs if self.num_docs else 0.0
        )
        
        logger.debug(
            f"Corpus statistics: {self.num_docs} docs, "
            f"{len(self._doc_freq)} unique terms, avgdl={self._avg_length:.2f}"
        )
    
    def average_length(self) -> float:
        """Mean document length in tokens (0.0 when the corpus is empty)."""
        return self._avg_length
    
    def document_frequency(self, term: str) -> int:
        """Number of documents whose token sequence contains term."""
        return self._doc_freq.get(term, 0)
    
    def idf(self, term: str) -> float:
        return calculate_idf(self.num_docs, self.document_frequency(term))

"""
BM25 scorer with corpus IDF and synonym weighting.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.

Formula (per query term):
    score(term, doc) = weight × idf(term) × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl))

Where:
    tf = term frequency in document
    idf = ln((N - df + 0.5) / (df + 0.5) + 1)
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    dl = document length (number of tokens)
    avgdl = average document length across the corpus
    weight = 1.0 for terms from the original query, synonym_weight (0.7) for expanded terms

Repeated terms in the expanded query are scored again each time they appear.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, List, Sequence

from .corpus import CorpusStatistics

logger = logging.getLogger(__name__)

DEFAULT_K1 = 1.5
DEFAULT_B = 0.75
SYNONYM_WEIGHT = 0.7  # Synonyms contribute 70% of an exact match


@dataclass
class ScoredDocument:
    """BM25 score of one document plus the distinct query terms it matched"""
    score: float = 0.0
    matched_tokens: List[str] = field(default_factory=list)  # First-seen order


class BM25Scorer:
    """
    BM25 scoring against a fixed corpus snapshot.
    
    Exact query terms get full weight, synonym-derived terms are discounted.
    """
    
    def __init__(
        self,
        corpus: CorpusStatistics,
        k1: float = DEFAULT_K1,
        b: float = DEFAULT_B,
        synonym_weight: float = SYNONYM_WEIGHT
    ):
        """
        Initialize BM25 scorer.
        
        Args:
            corpus: Statistics of the documents being scored (N, df, avgdl)
            
            k1: Term frequency saturation parameter
                Higher = more weight to repeated terms
                Default: 1.5
                
            b: Length normalization parameter
                Higher = more penalty for long documents
                Range: 0.0 - 1.0
                Default: 0.75 (standard)
                
            synonym_weight: Multiplier for terms not in the original query
                Default: 0.7
        """
        self.corpus = corpus
        self.k1 = k1
        self.b = b
        self.synonym_weight = synonym_weight
    
    def score(
        self,
        query_terms: Sequence[str],
        original_terms: AbstractSet[str],
        doc_tokens: Sequence[str]
    ) -> ScoredDocument:
        """
        Compute BM25 score for a document given expanded query terms.
        
        Args:
            query_terms: Expanded query tokens (duplicates add up)
            original_terms: Tokens present in the unexpanded query
            doc_tokens: Document token sequence (name tokens + description tokens)
        
        Returns:
            ScoredDocument with non-negative score and matched terms
            
        Example:
            >>> docs = [["read", "file"], ["write", "file"]]
            >>> scorer = BM25Scorer(CorpusStatistics(docs))
            >>> result = scorer.score(["read", "file"], {"read", "file"}, docs[0])
            >>> result.matched_tokens
            ['read', 'file']
        """
        result = ScoredDocument()
        
        if not query_terms or not doc_tokens:
            return result
        
        avgdl = self.corpus.average_length()
        if avgdl == 0:
            # Empty corpus, nothing to normalize against
            return result
        
        term_frequencies = Counter(doc_tokens)
        dl = len(doc_tokens)
        length_norm = 1 - self.b + self.b * (dl / avgdl)
        
        for term in query_terms:
            tf = term_frequencies.get(term, 0)
            
            if tf == 0:
                continue
            
            numerator = tf * (self.k1 + 1)
            denominator = tf + self.k1 * length_norm
            
            weight = 1.0 if term in original_terms else self.synonym_weight
            result.score += weight * self.corpus.idf(term) * (numerator / denominator)
            
            if term not in result.matched_tokens:
                result.matched_tokens.append(term)
        
        return result

"""
BM25 (Best Match 25) scoring for tool search.

Components:
- tokenizer: Text normalization into index terms
- corpus: Per-call corpus statistics (document frequency, average length, IDF)
- scorer: BM25 scoring with synonym weighting

Statistics are computed from the catalog passed to each search call.
Nothing is cached between calls.
"""

from .tokenizer import tokenize
from .corpus import CorpusStatistics, calculate_idf
from .scorer import BM25Scorer, ScoredDocument

__all__ = [
    "tokenize",
    "CorpusStatistics",
    "calculate_idf",
    "BM25Scorer",
    "ScoredDocument",
]

"""
toolsearch - offline lexical search over tool catalogs.

Ranks tools (name + description, grouped by server) against a natural-language
query using BM25 with corpus IDF, synonym expansion and deterministic
tie-breaking. No embeddings, no external index.

Usage:
    from toolsearch import search
    
    results = search("read file", [
        {"server": "fs", "tool": {"name": "read_file", "description": "Read a file from disk"}},
    ])
    for result in results:
        print(result.server, result.tool.name, result.score, result.matched_tokens)
"""

from .bm25 import tokenize
from .errors import (
    ToolSearchError,
    InputValidationError,
    CatalogValidationError,
    OptionsValidationError,
)
from .models import ToolInfo, CatalogEntry, SearchOptions, SearchResult
from .synonyms import BaseSynonymExpander, DictionarySynonymExpander, ExpandedQuery
from .search import search, search_async

__all__ = [
    "tokenize",
    "search",
    "search_async",
    "ToolInfo",
    "CatalogEntry",
    "SearchOptions",
    "SearchResult",
    "BaseSynonymExpander",
    "DictionarySynonymExpander",
    "ExpandedQuery",
    "ToolSearchError",
    "InputValidationError",
    "CatalogValidationError",
    "OptionsValidationError",
]

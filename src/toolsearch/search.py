"""
Tool search: rank a tool catalog against a natural-language query.

Process:
1. Validate catalog entries and options
2. Tokenize query and expand with synonyms (optional)
3. Tokenize every tool (name + description) and compute corpus statistics
4. Score each tool with BM25, synonym matches weighted at 70%
5. Filter by threshold, sort with tie-breaking, return top N

Everything is computed from the arguments of one call. No index is kept.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from .bm25.corpus import CorpusStatistics
from .bm25.scorer import BM25Scorer
from .bm25.tokenizer import tokenize
from .config import load_options
from .errors import (
    CatalogValidationError,
    InputValidationError,
    OptionsValidationError,
    format_pydantic_errors,
)
from .models import CatalogEntry, SearchOptions, SearchResult
from .ranker import RankedCandidate, rank
from .synonyms import BaseSynonymExpander, expand_query

logger = logging.getLogger(__name__)

CatalogInput = Union[CatalogEntry, Mapping[str, Any]]
OptionsInput = Union[SearchOptions, Mapping[str, Any], None]


def _validate_catalog(tools: Iterable[CatalogInput]) -> List[CatalogEntry]:
    if tools is None or isinstance(tools, (str, bytes, Mapping)):
        raise CatalogValidationError(
            f"Tool catalog must be a sequence of {{server, tool}} entries, got {type(tools).__name__}."
        )
    
    try:
        entries = iter(tools)
    except TypeError as e:
        raise CatalogValidationError(
            f"Tool catalog must be a sequence of {{server, tool}} entries, got {type(tools).__name__}."
        ) from e
    
    catalog = []
    for index, entry in enumerate(entries):
        if isinstance(entry, CatalogEntry):
            catalog.append(entry)
            continue
        try:
            catalog.append(CatalogEntry.model_validate(entry))
        except ValidationError as e:
            raise CatalogValidationError(
                f"Invalid tool catalog entry at index {index}:\n"
                f"{format_pydantic_errors(e.errors())}\n"
                f"Expected: {{'server': str, 'tool': {{'name': str, 'description': str | None}}}}",
                index=index,
                errors=e.errors(),
            ) from e
    return catalog


def _resolve_options(options: OptionsInput) -> SearchOptions:
    if options is None:
        return load_options()
    if isinstance(options, SearchOptions):
        return options
    try:
        return SearchOptions.model_validate(options)
    except ValidationError as e:
        raise OptionsValidationError(
            f"Invalid search options:\n{format_pydantic_errors(e.errors())}",
            errors=e.errors(),
        ) from e


def search(
    query: str,
    tools: Iterable[CatalogInput],
    options: OptionsInput = None,
    expander: Optional[BaseSynonymExpander] = None,
) -> List[SearchResult]:
    """
    Rank tools by relevance to a natural-language query.
    
    Args:
        query: Search query (empty or all-short-word queries return no results)
        tools: Catalog entries, CatalogEntry or {"server": ..., "tool": {"name": ..., "description": ...}}
        options: SearchOptions, a mapping (threshold, limit, useSynonyms),
            or None to use environment defaults
        expander: Synonym expander (default: built-in dictionary expander)
    
    Returns:
        At most options.limit results, best first
        
    Raises:
        InputValidationError: If query is not a string
        CatalogValidationError: If a catalog entry is malformed
        OptionsValidationError: If options are invalid
        
    Example:
        >>> results = search("read file", [
        ...     {"server": "fs", "tool": {"name": "read_file", "description": "Read a file from disk"}},
        ...     {"server": "fs", "tool": {"name": "write_file", "description": "Write a file to disk"}},
        ... ])
        >>> [r.tool.name for r in results]
        ['read_file', 'write_file']
    """
    if not isinstance(query, str):
        raise InputValidationError(f"Query must be a string, got {type(query).__name__}.")
    
    catalog = _validate_catalog(tools)
    opts = _resolve_options(options)
    
    query_tokens = tokenize(query)
    if not query_tokens or not catalog or opts.limit == 0:
        logger.info(
            f"Tool search: {len(query_tokens)} query tokens, {len(catalog)} tools, limit={opts.limit} -> 0 results"
        )
        return []
    
    expanded = expand_query(query_tokens, use_synonyms=opts.use_synonyms, expander=expander)
    logger.debug(
        f"Query tokens: {query_tokens}, expanded: {expanded.tokens} "
        f"(synonyms={'on' if opts.use_synonyms else 'off'})"
    )
    
    # Name tokens are kept separately for tie-breaking
    name_tokens = [tokenize(entry.tool.name) for entry in catalog]
    documents = [
        names + tokenize(entry.tool.description or '')
        for entry, names in zip(catalog, name_tokens)
    ]
    
    corpus = CorpusStatistics(documents)
    scorer = BM25Scorer(corpus)
    
    candidates = []
    for entry, names, doc_tokens in zip(catalog, name_tokens, documents):
        scored = scorer.score(expanded.tokens, expanded.original_tokens, doc_tokens)
        candidates.append(RankedCandidate.from_scored(entry.server, entry.tool, scored, names))
    
    ranked = rank(candidates, threshold=opts.threshold, limit=opts.limit)
    
    logger.info(
        f"Tool search: {len(query_tokens)} query tokens, {len(catalog)} tools, "
        f"threshold={opts.threshold} -> {len(ranked)} results"
    )
    
    return [
        SearchResult(
            server=c.server,
            tool=c.tool,
            score=c.score,
            matched_tokens=c.matched_tokens,
        )
        for c in ranked
    ]


async def search_async(
    query: str,
    tools: Iterable[CatalogInput],
    options: OptionsInput = None,
    expander: Optional[BaseSynonymExpander] = None,
) -> List[SearchResult]:
    """
    Awaitable wrapper around search() for async callers.
    
    The search itself is synchronous and CPU-only; nothing is awaited.
    """
    return search(query, tools, options=options, expander=expander)

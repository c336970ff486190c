"""
Query expansion with synonyms.

All expanders must implement the BaseSynonymExpander interface to be swappable.
search() only calls expand(), so any object with a compatible expand() works.

Expansion contract:
- Output tokens contain every input token, in input order, plus related terms
- Duplicates in the output are meaningful (each occurrence is scored)
- original_tokens is exactly the set of input tokens
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .bm25.tokenizer import tokenize

logger = logging.getLogger(__name__)


# Groups of interchangeable terms for common tool verbs and nouns.
# Every member must already be a normalized token (lowercase, [a-z0-9], > 2 chars).
DEFAULT_SYNONYM_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("read", "view", "show", "display", "cat"),
    ("fetch", "download", "retrieve", "pull"),
    ("write", "save", "store", "persist"),
    ("delete", "remove", "erase", "destroy", "drop"),
    ("create", "make", "add", "new", "generate"),
    ("update", "modify", "edit", "change", "patch"),
    ("search", "find", "query", "lookup", "locate"),
    ("list", "enumerate", "browse"),
    ("run", "execute", "exec", "invoke", "launch"),
    ("send", "post", "publish", "submit"),
    ("move", "rename", "relocate"),
    ("copy", "duplicate", "clone"),
    ("file", "document", "doc"),
    ("directory", "folder", "dir"),
    ("url", "link", "uri"),
    ("message", "msg", "chat"),
    ("email", "mail"),
    ("image", "picture", "photo", "img"),
    ("database", "datastore"),
    ("repository", "repo"),
    ("issue", "ticket", "bug"),
    ("user", "account", "member"),
    ("calendar", "schedule", "event"),
    ("web", "internet", "online"),
)


@dataclass
class ExpandedQuery:
    """Query tokens after expansion"""
    tokens: List[str]                                     # Original + related terms
    original_tokens: Set[str] = field(default_factory=set)  # Exact query terms


class BaseSynonymExpander(ABC):
    """
    Abstract base class for synonym expansion.
    
    All expanders must implement this interface to be swappable.
    """
    
    @abstractmethod
    def expand(self, tokens: Sequence[str]) -> ExpandedQuery:
        """
        Expand normalized query tokens with related terms.
        
        Args:
            tokens: Tokenized query
            
        Returns:
            ExpandedQuery with tokens (superset of input) and original_tokens
        """
        pass


class DictionarySynonymExpander(BaseSynonymExpander):
    """
    Synonym expansion from groups of interchangeable terms.
    
    A term listed in several groups is related to the members of all of them.
    Each query token is followed by its related terms that are not already
    part of the query and were not emitted earlier.
    """
    
    def __init__(self, groups: Optional[Iterable[Iterable[str]]] = None):
        """
        Args:
            groups: Synonym groups (default: DEFAULT_SYNONYM_GROUPS)
            
        Raises:
            ValueError: If a group member is not a normalized token
        """
        if groups is None:
            groups = DEFAULT_SYNONYM_GROUPS
        
        self._related: Dict[str, List[str]] = {}
        
        for group in groups:
            members = list(group)
            for term in members:
                if tokenize(term) != [term]:
                    raise ValueError(
                        f"Invalid synonym '{term}' in group {members}.\n"
                        f"Synonyms must be lowercase alphanumeric tokens longer than 2 characters."
                    )
            
            for term in members:
                related = self._related.setdefault(term, [])
                for other in members:
                    if other != term and other not in related:
                        related.append(other)
    
    def related_terms(self, token: str) -> List[str]:
        """Terms related to token, in declaration order."""
        return list(self._related.get(token, []))
    
    def expand(self, tokens: Sequence[str]) -> ExpandedQuery:
        original = set(tokens)
        expanded: List[str] = []
        added: Set[str] = set()
        
        for token in tokens:
            expanded.append(token)
            for synonym in self._related.get(token, []):
                if synonym in original or synonym in added:
                    continue
                added.add(synonym)
                expanded.append(synonym)
        
        if added:
            logger.debug(f"Expanded query {list(tokens)} with synonyms {sorted(added)}")
        
        return ExpandedQuery(tokens=expanded, original_tokens=original)


_default_expander: Optional[DictionarySynonymExpander] = None


def get_default_expander() -> DictionarySynonymExpander:
    """Shared expander over DEFAULT_SYNONYM_GROUPS (built on first use)."""
    global _default_expander
    if _default_expander is None:
        _default_expander = DictionarySynonymExpander()
    return _default_expander


def expand_query(
    tokens: Sequence[str],
    use_synonyms: bool = True,
    expander: Optional[BaseSynonymExpander] = None
) -> ExpandedQuery:
    """
    Build the expanded query term set.
    
    With use_synonyms=False the expander is not called at all and the query
    tokens are used as-is.
    
    Args:
        tokens: Tokenized query
        use_synonyms: Whether to call the expander
        expander: Custom expander (default: dictionary expander)
        
    Returns:
        ExpandedQuery
    """
    if not use_synonyms:
        return ExpandedQuery(tokens=list(tokens), original_tokens=set(tokens))
    
    if expander is None:
        expander = get_default_expander()
    
    return _coerce_expansion(expander.expand(list(tokens)))


def _coerce_expansion(
    result: Union[ExpandedQuery, Tuple[Sequence[str], Iterable[str]]]
) -> ExpandedQuery:
    """Accept ExpandedQuery or a (tokens, original_tokens) pair from third-party expanders."""
    if isinstance(result, ExpandedQuery):
        return result
    
    expanded_tokens, original_tokens = result
    return ExpandedQuery(tokens=list(expanded_tokens), original_tokens=set(original_tokens))

"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Lowercase conversion
2. Replace everything outside [a-z0-9] with whitespace
3. Split on whitespace
4. Drop tokens of 2 characters or fewer (acts as a stopword filter)

No stemming: "files" and "file" are different terms.
"""

import re
from typing import List, Optional

_NON_ALNUM = re.compile(r'[^a-z0-9]')

# Tokens must be longer than this
MIN_TOKEN_LENGTH = 2


def tokenize(text: Optional[str]) -> List[str]:
    """
    Tokenize text into normalized index terms.
    
    Order and duplicates are preserved, term frequency matters for scoring.
    
    Args:
        text: Input text to tokenize (None is treated as empty text)
        
    Returns:
        List of lowercase alphanumeric tokens longer than 2 characters
        
    Examples:
        >>> tokenize("Read a file from disk")
        ['read', 'file', 'from', 'disk']
        
        >>> tokenize("read_file")
        ['read', 'file']
        
        >>> tokenize("ab cd")
        []
    """
    if not text:
        return []
    
    text = _NON_ALNUM.sub(' ', text.lower())
    
    return [t for t in text.split() if len(t) > MIN_TOKEN_LENGTH]

"""
Tokenizer for BM25 text processing.

Tokenization pipeline (documents):
1. Lowercase conversion
2. Split on runs of non-word characters (ASCII: anything but [A-Za-z0-9_])
3. Drop empty fragments
4. Drop fragments shorter than MIN_TERM_LENGTH

Queries go through the same split and length filter but are not lowercased
here; the scorer lowercases each term before counting.
"""

import re
from typing import Any, List

from .errors import CorpusConfigurationError

# Shorter terms are dropped from both documents and queries
MIN_TERM_LENGTH = 3

_NON_WORD = re.compile(r"\W+", re.ASCII)


def _split_terms(text: str) -> List[str]:
    return [t for t in _NON_WORD.split(text) if t and len(t) >= MIN_TERM_LENGTH]


def tokenize(text: str) -> List[str]:
    """
    Tokenize document text.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase tokens, each at least MIN_TERM_LENGTH long

    Examples:
        >>> tokenize("The cat sat on the mat!")
        ['the', 'cat', 'sat', 'the', 'mat']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []
    return _split_terms(text.lower())


def tokenize_query(query: str) -> List[str]:
    """
    Extract query terms.

    Same split and length filter as tokenize(), applied to plain query text
    regardless of the corpus processor.

    Examples:
        >>> tokenize_query("Cat, or dog?")
        ['Cat', 'dog']
    """
    if not query:
        return []
    return _split_terms(query)


def default_processor(document: Any) -> List[str]:
    """Default document processor: tokenize() for string payloads only."""
    if not isinstance(document, str):
        raise CorpusConfigurationError(
            f"Default processor expects str documents, got {type(document).__name__}; "
            f"pass a custom processor for non-text payloads"
        )
    return tokenize(document)

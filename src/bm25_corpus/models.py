"""Records produced by the corpus: indexed documents and search results"""

from dataclasses import dataclass
from typing import Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Document(Generic[T]):
    """Indexed document: caller payload plus the tokens derived from it"""
    original: T         # Caller-owned, never copied or mutated
    words: List[str]    # Token list produced by the corpus processor


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Single ranked result"""
    document: T         # Original payload
    score: float        # Mean BM25 score over query terms (> 0)

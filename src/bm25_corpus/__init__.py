"""
BM25 relevance ranking over small in-memory corpora.

Components:
- tokenizer: default document processor and query term extraction
- options: resolved corpus configuration (k1, b, gamma, processor)
- models: Document and SearchResult records
- scorer: term statistics and the BM25 formula
- corpus: document ingestion and the search/ranking pipeline

Example:
    >>> from bm25_corpus import Corpus
    >>> corpus = Corpus(["the cat sat on the mat", "dogs are great pets"])
    >>> [r.document for r in corpus.search("cat")]
    ['the cat sat on the mat']
"""

from .tokenizer import MIN_TERM_LENGTH, tokenize, tokenize_query
from .errors import CorpusConfigurationError
from .options import CorpusOptions, resolve_options
from .models import Document, SearchResult
from .scorer import BM25Scorer
from .corpus import Corpus

__all__ = [
    "MIN_TERM_LENGTH",
    "tokenize",
    "tokenize_query",
    "CorpusConfigurationError",
    "CorpusOptions",
    "resolve_options",
    "Document",
    "SearchResult",
    "BM25Scorer",
    "Corpus",
]

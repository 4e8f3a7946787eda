"""
In-memory BM25 corpus: document ingestion and the search/ranking pipeline.

The corpus keeps an append-only list of Documents and nothing else. Every
search rescans it (document frequency, average length), so there is no index
to invalidate when documents are added.

Not thread-safe: callers must serialize add_document() against search().
"""

import logging
from typing import Any, Generic, Iterable, List, Mapping, Optional, Union

from .models import Document, SearchResult, T
from .options import CorpusOptions, resolve_options
from .scorer import BM25Scorer
from .tokenizer import tokenize_query

logger = logging.getLogger(__name__)


class Corpus(Generic[T]):
    """
    Collection of documents searchable with BM25.

    Example:
        >>> corpus = Corpus([
        ...     "the cat sat on the mat",
        ...     "dogs are great pets",
        ...     "the cat and the dog played",
        ... ])
        >>> [r.document for r in corpus.search("cat")]
        ['the cat sat on the mat', 'the cat and the dog played']

    Non-text payloads need a processor:
        >>> from bm25_corpus import tokenize
        >>> corpus = Corpus(
        ...     [{"title": "Kubernetes deployment"}],
        ...     processor=lambda doc: tokenize(doc["title"])
        ... )
    """

    def __init__(
        self,
        documents: Iterable[T] = (),
        options: Optional[Union[CorpusOptions, Mapping[str, Any]]] = None,
        **overrides: Any
    ):
        """
        Args:
            documents: Initial payloads, indexed in order
            options: CorpusOptions or mapping of processor/k1/b/gamma
            **overrides: Individual option fields, applied over options

        Raises:
            CorpusConfigurationError: Invalid options, or a payload the
                processor rejects (non-string payload with the default processor)
        """
        self.options = resolve_options(options, **overrides)
        self.scorer = BM25Scorer(k1=self.options.k1, b=self.options.b, gamma=self.options.gamma)
        self.documents: List[Document[T]] = [self._process_document(d) for d in documents]

        logger.debug(
            f"Corpus created: {len(self.documents)} documents "
            f"(k1={self.options.k1}, b={self.options.b}, gamma={self.options.gamma})"
        )

    def __len__(self) -> int:
        return len(self.documents)

    def _process_document(self, document: T) -> Document[T]:
        return Document(original=document, words=list(self.options.processor(document)))

    def add_document(self, document: T) -> None:
        """Process a payload with the corpus processor and append it"""
        processed = self._process_document(document)
        self.documents.append(processed)
        logger.debug(f"Added document #{len(self.documents)} ({len(processed.words)} tokens)")

    def search(self, query: str, partial: bool = False) -> List[SearchResult[T]]:
        """
        Rank documents against a free-text query.

        Process:
        1. Extract query terms (split on non-word characters, length filter)
        2. Score every document: mean BM25 over query terms
        3. Drop documents scoring <= 0
        4. Sort by score descending (ties keep insertion order)

        Args:
            query: Free-text query
            partial: Match terms as substrings of tokens instead of whole tokens

        Returns:
            List of SearchResult, best first. Empty for an empty corpus or a
            query without usable terms.
        """
        terms = tokenize_query(query)
        if not terms:
            logger.debug(f"Query {query!r} has no terms of usable length")
            return []

        if not self.documents:
            return []

        # No document has tokens: nothing can match and avgdl would be zero
        if not any(document.words for document in self.documents):
            return []

        scored = []
        for document in self.documents:
            total = sum(self.scorer.score(term, document, self.documents, partial) for term in terms)
            score = total / len(terms)
            # nan (out-of-range k1/b) fails this comparison too
            if score > 0:
                scored.append((document, score))

        scored.sort(key=lambda item: item[1], reverse=True)

        logger.debug(
            f"Search {query!r} (terms={terms}, partial={partial}): "
            f"{len(scored)}/{len(self.documents)} documents matched"
        )

        return [SearchResult(document=document.original, score=score) for document, score in scored]

"""
BM25 scorer with corpus-wide IDF.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.
All statistics are recomputed from the document sequence passed in on every call,
so documents appended to a corpus are visible to the very next search.

Formula:
    score(term, doc) = idf × ((tf × (k1 + 1)) / (tf + k1 × (1 - b + b × dl/avgdl)) + gamma)
    idf(term)        = ln((N - n + 0.5) / (n + 0.5) + 1)

Where:
    tf = term frequency in document (exact or substring match)
    n = number of documents containing the term
    N = number of documents in the corpus
    dl = document length (number of tokens)
    avgdl = average document length across the corpus
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    gamma = additive per-term floor, scaled by idf (default: 0)

The "+ 1" inside the logarithm keeps idf finite and non-negative for every n in [0, N].
"""

import math
from typing import Sequence

import numpy as np

from .models import Document


def matches(token: str, term: str, partial: bool) -> bool:
    """Exact token equality, or substring containment when partial"""
    return term in token if partial else token == term


class BM25Scorer:
    """
    Per-term BM25 scoring against a live document sequence.
    """

    def __init__(self, k1: float = 1.5, b: float = 0.75, gamma: float = 0.0):
        """
        Initialize BM25 scorer.

        Args:
            k1: Term frequency saturation parameter
                Higher = more weight to repeated occurrences
                0 = every matching document gets idf × 1

            b: Length normalization parameter
                Higher = more penalty for long documents
                0 = no length normalization

            gamma: Additive smoothing term
                Added to the saturation fraction before multiplying by idf

        Values are not range-checked.
        """
        self.k1 = k1
        self.b = b
        self.gamma = gamma

    def term_frequency(self, term: str, document: Document, partial: bool = False) -> int:
        term = term.lower()
        return sum(1 for token in document.words if matches(token, term, partial))

    def document_frequency(self, term: str, documents: Sequence[Document], partial: bool = False) -> int:
        term = term.lower()
        return sum(
            1 for document in documents
            if any(matches(token, term, partial) for token in document.words)
        )

    @staticmethod
    def average_document_length(documents: Sequence[Document]) -> float:
        """Mean token count. Callers must not pass an empty sequence."""
        return sum(len(document.words) for document in documents) / len(documents)

    def inverse_document_frequency(self, term: str, documents: Sequence[Document], partial: bool = False) -> float:
        """
        Compute idf for a term.

        Example:
            >>> docs = [Document("a", ["cat"]), Document("b", ["dog"])]
            >>> round(BM25Scorer().inverse_document_frequency("cat", docs), 4)
            0.6931
        """
        n = self.document_frequency(term, documents, partial)
        total = len(documents)
        return math.log((total - n + 0.5) / (n + 0.5) + 1)

    def score(
        self,
        term: str,
        document: Document,
        documents: Sequence[Document],
        partial: bool = False
    ) -> float:
        """
        Compute the BM25 contribution of one query term to one document.

        Args:
            term: Query term (lowercased before matching)
            document: Document being scored
            documents: Whole corpus, for idf and average length
            partial: Substring matching instead of exact token equality

        Returns:
            idf × (saturation + gamma)
        """
        tf = self.term_frequency(term, document, partial)
        idf = self.inverse_document_frequency(term, documents, partial)

        if tf == 0:
            saturation = 0.0
        else:
            avgdl = self.average_document_length(documents)
            numerator = tf * (self.k1 + 1)
            denominator = tf + self.k1 * (
                1 - self.b + self.b * len(document.words) / avgdl
            )
            # Zero denominators are only reachable with out-of-range k1/b; yield inf/nan
            with np.errstate(divide="ignore", invalid="ignore"):
                saturation = float(np.divide(np.float64(numerator), np.float64(denominator)))

        return idf * (saturation + self.gamma)

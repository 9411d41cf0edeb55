"""
Ranking of candidate documents by weighted tf-idf relevance.
"""
from functools import cmp_to_key
from typing import Dict, Iterable, List, Sequence, Tuple

from ..preprocessing.document import DocumentId

DEFAULT_WEIGHTS = (0.6, 0.4)


class TfIdfRanker:
    """
    Orders documents by tf-idf relevance to a list of query terms.

    Larger scores come first. Ties are broken by the lexicographic order of
    the document id strings, so distinct ids never compare equal.
    Only the first two query terms are weighted; any further terms are ignored.
    """

    def __init__(self, engine, terms: Sequence[str], weights: Tuple[float, float] = DEFAULT_WEIGHTS):
        """
        Initialize the ranker.

        Args:
            engine: SearchEngine providing tf_idf scores (only read, never mutated)
            terms: Query terms in priority order
            weights: Weights of the first and second query term
        """
        self.engine = engine
        self.terms = list(terms)
        self.weights = weights

    def score(self, doc_id: DocumentId) -> float:
        """
        Weighted tf-idf of the document for the query terms.

        Raises:
            ValueError: If there are no query terms
            UnknownDocumentError: If the document was never ingested
        """
        if not self.terms:
            raise ValueError("Cannot score a document without query terms")

        if len(self.terms) == 1:
            return self.engine.tf_idf(doc_id, self.terms[0])

        primary, secondary = self.weights
        return (primary * self.engine.tf_idf(doc_id, self.terms[0])
                + secondary * self.engine.tf_idf(doc_id, self.terms[1]))

    def sort_key(self, doc_id: DocumentId):
        return -self.score(doc_id), doc_id.value

    def compare(self, first: DocumentId, second: DocumentId) -> int:
        """Comparator form of the ordering: negative if first ranks before second."""
        first_key = self.sort_key(first)
        second_key = self.sort_key(second)
        if first_key < second_key:
            return -1
        if first_key > second_key:
            return 1
        return 0

    def cmp_key(self):
        return cmp_to_key(self.compare)

    def rank(self, doc_ids: Iterable[DocumentId]) -> List[DocumentId]:
        """
        Sort documents from most to least relevant.

        Args:
            doc_ids: Candidate documents

        Returns:
            List of document ids, most relevant first
        """
        # Score every candidate once instead of once per comparison
        keys: Dict[DocumentId, tuple] = {doc_id: self.sort_key(doc_id) for doc_id in doc_ids}
        return sorted(keys, key=keys.__getitem__)


def rank_documents(engine, terms: Sequence[str], doc_ids: Iterable[DocumentId],
                   weights: Tuple[float, float] = DEFAULT_WEIGHTS) -> List[DocumentId]:
    """
    Rank documents by weighted tf-idf relevance to the query terms.

    Args:
        engine: SearchEngine to read scores from
        terms: Query terms in priority order
        doc_ids: Candidate documents
        weights: Weights of the first and second query term

    Returns:
        List of document ids, most relevant first
    """
    return TfIdfRanker(engine, terms, weights).rank(doc_ids)

"""
A simplified in-memory document indexer and search engine.

Documents are added one by one and identified by a DocumentId. Their text is
split into terms (lower-cased words with surrounding punctuation stripped).
Documents can be looked up by term, and ranked by tf-idf relevance to a list
of query terms.
"""
import io
import logging
import math
import threading
from collections import defaultdict
from contextlib import nullcontext
from typing import Dict, List, Optional, Sequence, Set

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, ranking_weights
from .errors import UnknownDocumentError
from .logging_config import set_log_level
from .preprocessing.document import DocumentId
from .preprocessing.preprocess import create_ingestion_pipeline
from .tfidf_search.ranking import rank_documents

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Inverted index (term -> document ids) plus forward index
    (document id -> term counts), both append-only.

    Ingestion normalizes punctuation, while lookups only lower-case the term
    and relevance_lookup uses the terms exactly as given.
    """

    def __init__(self, config=None):
        """
        Initialize an empty search engine.

        Args:
            config: Configuration dictionary (loaded from config.json if not provided)
        """
        self.config = config or load_config()
        self.weights = ranking_weights(self.config)
        log_level = self.config.get("logging", {}).get("level")
        if log_level is not None:
            set_log_level(log_level)
        self.pipeline = create_ingestion_pipeline()

        self.inverted_index: Dict[str, Set[DocumentId]] = {}
        self.forward_index: Dict[DocumentId, Dict[str, int]] = {}

        thread_safe = self.config.get("engine", {}).get("thread_safe", False)
        self._lock = threading.RLock() if thread_safe else nullcontext()

    def ingest(self, doc_id: DocumentId, text: str) -> None:
        """
        Add a document's text to both indexes.

        Ingesting the same id again adds to its term counts.

        Args:
            doc_id: Id of the document
            text: Raw text of the document
        """
        terms = self.pipeline.terms(text)

        with self._lock:
            term_counts = self.forward_index.setdefault(doc_id, defaultdict(int))
            for term in terms:
                self.inverted_index.setdefault(term, set()).add(doc_id)
                term_counts[term] += 1

        logger.debug("Ingested %d terms for %s", len(terms), doc_id)

    add_document = ingest

    def lookup_by_term(self, term: str) -> Optional[Set[DocumentId]]:
        """
        Get the documents containing a term.

        The term is lower-cased but not stripped of punctuation. The stored
        set is returned as is, not copied.

        Args:
            term: Term to look up

        Returns:
            Set of document ids, or None if the term was never indexed
        """
        with self._lock:
            return self.inverted_index.get(term.lower())

    index_lookup = lookup_by_term

    def term_frequency(self, doc_id: DocumentId, term: str) -> int:
        """
        Number of occurrences of a term in a document.

        Raises:
            UnknownDocumentError: If the document was never ingested
        """
        with self._lock:
            term_counts = self.forward_index.get(doc_id)
            if term_counts is None:
                raise UnknownDocumentError(doc_id)
            return term_counts.get(term.lower(), 0)

    def inverse_document_frequency(self, term: str) -> float:
        """
        Smoothed inverse document frequency of a term.
        IDF(t) = ln((1 + N) / (1 + M)), N documents in total, M containing t
        """
        with self._lock:
            total = len(self.forward_index)
            containing = len(self.inverted_index.get(term.lower(), ()))
        return math.log((1 + total) / (1 + containing))

    def tf_idf(self, doc_id: DocumentId, term: str) -> float:
        """
        tf-idf weight of a term for a document.

        Raises:
            UnknownDocumentError: If the document was never ingested
        """
        return self.inverse_document_frequency(term) * self.term_frequency(doc_id, term)

    def relevance_lookup(self, terms: Sequence[str]) -> List[DocumentId]:
        """
        Get the documents containing any of the terms, most relevant first.

        Terms are matched exactly against the index keys (no case-folding).

        Args:
            terms: Query terms; only the first two are weighted when ranking

        Returns:
            List of document ids sorted by descending relevance
        """
        terms = list(terms)
        with self._lock:
            candidates = set()
            for term in terms:
                if term in self.inverted_index:
                    candidates.update(self.inverted_index[term])

            ranked = rank_documents(self, terms, candidates, self.weights)

        logger.debug("Relevance lookup for %s matched %d documents", list(terms), len(ranked))
        return ranked

    @property
    def document_count(self) -> int:
        return len(self.forward_index)

    @property
    def term_count(self) -> int:
        return len(self.inverted_index)

    def __len__(self):
        return self.document_count

    def __contains__(self, doc_id):
        return doc_id in self.forward_index

    def dump(self, width=100) -> str:
        """Render both indexes as text tables. For diagnostics only."""
        terms_table = Table(title="Term to doc id map", box=box.SIMPLE)
        terms_table.add_column("Term", style="cyan")
        terms_table.add_column("Documents")
        docs_table = Table(title="Doc id to term frequency map", box=box.SIMPLE)
        docs_table.add_column("Document", style="cyan")
        docs_table.add_column("Term frequencies")

        with self._lock:
            for term in sorted(self.inverted_index):
                doc_ids = sorted(self.inverted_index[term])
                terms_table.add_row(escape(repr(term)), escape(", ".join(doc_id.value for doc_id in doc_ids)))
            for doc_id in sorted(self.forward_index):
                counts = self.forward_index[doc_id]
                frequencies = ", ".join(f"{term!r}: {count}" for term, count in sorted(counts.items()))
                docs_table.add_row(escape(doc_id.value), escape(frequencies))

        output = io.StringIO()
        console = Console(file=output, width=width, color_system=None)
        console.print(terms_table)
        console.print(docs_table)
        return output.getvalue()

    def __str__(self):
        return self.dump()

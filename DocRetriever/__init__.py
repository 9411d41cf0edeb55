"""
DocRetriever - in-memory document indexing and tf-idf ranked retrieval.
"""
import logging

from .config import load_config
from .errors import SearchEngineError, UnknownDocumentError
from .logging_config import configure_logging
from .preprocessing.document import DocumentId
from .search_engine import SearchEngine
from .tfidf_search.ranking import TfIdfRanker, rank_documents

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocumentId",
    "SearchEngine",
    "SearchEngineError",
    "TfIdfRanker",
    "UnknownDocumentError",
    "configure_logging",
    "load_config",
    "rank_documents",
]

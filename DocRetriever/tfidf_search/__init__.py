"""
TF-IDF ranking module for information retrieval.
Orders candidate documents by weighted tf-idf relevance to query terms.
"""
from .ranking import DEFAULT_WEIGHTS, TfIdfRanker, rank_documents

"""
Preprocessing module for text processing in information retrieval tasks.
Includes document identifiers, whitespace tokenization and term normalization.
"""
from .document import DocumentId
from .preprocess import PreprocessingPipeline, create_ingestion_pipeline, normalize_term
from .tokenizer import Token, WhitespaceTokenizer

from abc import ABC, abstractmethod
import re
from typing import List

from .tokenizer import Token, Tokenizer, WhitespaceTokenizer

TRAILING_PUNCTUATION = re.compile(r"[^a-zA-Z']+\Z")
LEADING_PUNCTUATION = re.compile(r"\A[^a-zA-Z]+")


class TokenPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, token: Token, document: str) -> Token:
        raise NotImplementedError()

    def preprocess_all(self, tokens: List[Token], document: str) -> List[Token]:
        return [self.preprocess(token, document) for token in tokens]


class LowercasePreprocessor(TokenPreprocessor):
    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = token.processed_form.lower()
        return token


class TrailingPunctuationPreprocessor(TokenPreprocessor):
    """Preprocessor stripping every trailing character that is not an ASCII letter or apostrophe."""

    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = TRAILING_PUNCTUATION.sub("", token.processed_form)
        return token


class LeadingPunctuationPreprocessor(TokenPreprocessor):
    """Preprocessor stripping every leading character that is not an ASCII letter."""

    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = LEADING_PUNCTUATION.sub("", token.processed_form)
        return token


class PreprocessingPipeline:
    """Pipeline of token preprocessors."""

    def __init__(self, preprocessors, tokenizer: Tokenizer = None, name="Default Pipeline"):
        """
        Initialize a preprocessing pipeline.

        Args:
            preprocessors: List of preprocessor objects, applied in order
            tokenizer: Tokenizer splitting raw text (defaults to WhitespaceTokenizer)
            name: Name of the pipeline
        """
        self.preprocessors = preprocessors
        self.tokenizer = tokenizer or WhitespaceTokenizer()
        self.name = name

    def preprocess(self, tokens: List[Token], document: str) -> List[Token]:
        """
        Apply all preprocessors to the tokens.

        Args:
            tokens: List of tokens to preprocess
            document: Original document text

        Returns:
            List of preprocessed tokens
        """
        for preprocessor in self.preprocessors:
            preprocessor.preprocess_all(tokens, document)

        return tokens

    def terms(self, text: str) -> List[str]:
        """
        Tokenize and preprocess text.

        Empty processed forms are kept: a token made only of punctuation or
        digits becomes the empty term, which is indexed like any other.

        Args:
            text: Raw document text

        Returns:
            Normalized terms in text order
        """
        tokens = self.tokenizer.tokenize(text)
        return [token.processed_form for token in self.preprocess(tokens, text)]


def create_ingestion_pipeline() -> PreprocessingPipeline:
    # Trailing strip runs before leading strip.
    return PreprocessingPipeline(
        [
            LowercasePreprocessor(),
            TrailingPunctuationPreprocessor(),
            LeadingPunctuationPreprocessor(),
        ],
        name="IngestionPipeline",
    )


_INGESTION_PIPELINE = create_ingestion_pipeline()


def normalize_term(raw_token: str) -> str:
    """Normalize a single raw token the way ingestion does."""
    token = Token(raw_token, 0)
    for preprocessor in _INGESTION_PIPELINE.preprocessors:
        preprocessor.preprocess(token, raw_token)
    return token.processed_form

from abc import ABC, abstractmethod
import re
from typing import List


class Token:
    """A raw token of a document together with its processed form."""

    def __init__(self, value: str, position: int):
        self.value = value
        self.position = position
        self.processed_form = value

    def __repr__(self):
        return f"Token({self.value!r}, position={self.position}, processed_form={self.processed_form!r})"


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, document: str) -> List[Token]:
        raise NotImplementedError()


ASCII_WHITESPACE = re.compile(r"[ \t\n\x0b\f\r]+")


class WhitespaceTokenizer(Tokenizer):
    """
    Splits text on runs of ASCII whitespace. Other Unicode spaces (e.g. no-break
    space) stay inside tokens. Leading and trailing whitespace yield no tokens.
    """

    def tokenize(self, document: str) -> List[Token]:
        if not document:
            return []
        words = [word for word in ASCII_WHITESPACE.split(document) if word]
        return [Token(word, position) for position, word in enumerate(words)]

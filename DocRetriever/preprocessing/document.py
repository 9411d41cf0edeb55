from functools import total_ordering


@total_ordering
class DocumentId:
    """
    Identifier of a document in the search engine.
    Wraps a string key; equality, hashing and ordering follow the wrapped string.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        """
        Initialize a document id.

        Args:
            value: Key of the document, stored verbatim (not normalized)
        """
        if value is None:
            raise TypeError("DocumentId value must not be None")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("DocumentId is immutable")

    def __delattr__(self, name):
        raise AttributeError("DocumentId is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__
        return DocumentId, (self._value,)

    @property
    def value(self) -> str:
        """The wrapped string key."""
        return self._value

    def get_document_id(self) -> str:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, DocumentId):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, DocumentId):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return f"DocumentId = {self._value}"

    def __repr__(self):
        return f"DocumentId({self._value!r})"

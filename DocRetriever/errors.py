class SearchEngineError(Exception):
    """Base class for search engine errors."""


class UnknownDocumentError(SearchEngineError, KeyError):
    """Raised when a document id that was never ingested is queried."""

    def __init__(self, doc_id):
        self.doc_id = doc_id
        super().__init__(f"Document id not in search engine: {getattr(doc_id, 'value', doc_id)}")

    def __str__(self):
        # KeyError would quote the message
        return self.args[0]

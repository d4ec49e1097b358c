"""Error hierarchy raised by the document manager"""


class DocstoreError(Exception):
    """Base class for docstore errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentNotGivenError(DocstoreError, ValueError):
    """save() was called without a document."""

    def __init__(self, message: str = "Document cannot be None"):
        super().__init__(message)


class DocumentNotFoundError(DocstoreError, LookupError):
    """An update referenced an id with no stored document."""

    def __init__(self, document_id: str):
        super().__init__(f"Document with id {document_id} not found")
        self.document_id = document_id

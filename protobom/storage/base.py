"""Storage backend interface, its options and a programmable fake backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from protobom.document import Document


@dataclass
class StoreOptions:
    """Options for storing a document."""

    # System-specific options passed through to the backend.
    backend_options: Any = None
    # Never overwrite a stored document with the same ID.
    no_clobber: bool = False


@dataclass
class RetrieveOptions:
    """Options for retrieving a document."""

    # System-specific options passed through to the backend.
    backend_options: Any = None


class Backend(ABC):
    """A place where SBOM documents can be stored and retrieved by ID."""

    @abstractmethod
    def store(self, document: Document, options: Optional[StoreOptions]) -> None:
        """Persist ``document``; raise on failure."""

    @abstractmethod
    def retrieve(self, document_id: str, options: Optional[RetrieveOptions]) -> Document:
        """Return the document stored under ``document_id``; raise on failure."""


@dataclass
class FakeBackend(Backend):
    """A backend that stores nothing and answers with preset results.

    Meant for tests of code that talks to a storage backend.
    """

    store_error: Optional[Exception] = None
    retrieve_document: Optional[Document] = None
    retrieve_error: Optional[Exception] = None

    def store(self, document: Document, options: Optional[StoreOptions]) -> None:
        """Raise the preset store error, if any."""
        if self.store_error is not None:
            raise self.store_error

    def retrieve(self, document_id: str, options: Optional[RetrieveOptions]) -> Document:
        """Raise the preset retrieve error, or return the preset document."""
        if self.retrieve_error is not None:
            raise self.retrieve_error
        return self.retrieve_document
"""
Base Document Processor

Defines the abstract interface that all document processors must implement.
This keeps every document type (PDF, Word) behind the same contract and
makes it easy to add new document kinds without touching the callers.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from models.document import Document, DocumentType

logger = logging.getLogger(__name__)


class DocumentProcessor(ABC):
    """
    Abstract base class for document processors.

    Subclasses declare the document types they handle and the tag that
    ``process`` prepends to a document's content. Callers are expected to
    check ``can_process`` first; ``process`` does not re-check it.
    """

    def __init__(self):
        """Initialize the document processor."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_supported_types(self) -> List[DocumentType]:
        """
        Get list of document types supported by this processor.

        Returns:
            List[DocumentType]: Supported document types
        """
        pass

    @abstractmethod
    def get_tag(self) -> str:
        """
        Get the prefix written in front of processed content.

        Returns:
            str: Content tag (e.g., 'PDF Processed: ')
        """
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        """Name used in the processing message."""
        pass

    def can_process(self, document_type: DocumentType) -> bool:
        """
        Check whether this processor handles the given document type.

        Args:
            document_type (DocumentType): Type to check

        Returns:
            bool: True if the type is supported
        """
        return document_type in self.get_supported_types()

    def process(self, document: Document) -> None:
        """
        Process a document in place.

        Announces the document and prepends the processor tag to its
        content. Not idempotent: a second call adds the tag again.

        Args:
            document (Document): Document to process
        """
        print(f"Processing {self.get_display_name()} document: {document.title}")
        document.content = self.get_tag() + document.content
        self.logger.debug(f"Tagged content of '{document.title}': {len(document.content)} characters")

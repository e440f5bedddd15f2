"""
Document service.

Binds one processor and one cloud storage backend and runs a document
through them: process first, then upload.
"""

import logging

from models.document import Document
from services.document_processing import DocumentProcessor
from services.storage import CloudStorage

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Coordinates processing and upload of documents.

    Dependencies are injected at construction; the service never builds
    its own processor or storage.
    """

    def __init__(self, processor: DocumentProcessor, storage: CloudStorage):
        """
        Initialize the service.

        Args:
            processor (DocumentProcessor): Processor applied to documents
            storage (CloudStorage): Backend receiving processed documents
        """
        self._processor = processor
        self._storage = storage

    def handle_document(self, document: Document) -> None:
        """
        Process and upload a document if the processor supports its type.

        Unsupported documents are reported on the console and left
        untouched. Nothing is returned and nothing is raised in either case.

        Args:
            document (Document): Document to handle
        """
        if self._processor.can_process(document.type):
            self._processor.process(document)
            self._storage.upload(document)
        else:
            logger.debug(f"{self._processor.__class__.__name__} skipped '{document.title}'")
            print(f"No processor available for {document.type.value}")

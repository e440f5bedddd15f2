"""
Document Processor Factory

Maps document types to processor classes. Unknown or unsupported
types yield no processor rather than an error, so callers decide how
to report the gap.
"""

import logging
from typing import Dict, List, Optional, Type

from models.document import DocumentType

from .base import DocumentProcessor
from .pdf_processor import PDFProcessor
from .word_processor import WordProcessor

logger = logging.getLogger(__name__)


class DocumentProcessorFactory:
    """
    Factory class for creating document processors based on document type.

    Image documents have no registered processor.
    """

    # Mapping of document types to processor classes
    _PROCESSORS: Dict[DocumentType, Type[DocumentProcessor]] = {
        DocumentType.PDF: PDFProcessor,
        DocumentType.WORD: WordProcessor
    }

    @classmethod
    def get_processor(cls, document_type: DocumentType) -> Optional[DocumentProcessor]:
        """
        Create appropriate document processor instance.

        Args:
            document_type (DocumentType): Type of document

        Returns:
            Optional[DocumentProcessor]: New processor instance, or None if
            no processor is registered for the type
        """
        processor_class = cls._PROCESSORS.get(document_type)

        if processor_class is None:
            logger.debug(f"No processor registered for {document_type.value}")
            return None

        processor = processor_class()
        logger.debug(f"Created {processor_class.__name__} instance")
        return processor

    @classmethod
    def is_supported(cls, document_type: DocumentType) -> bool:
        """Check if a processor is registered for the document type."""
        return document_type in cls._PROCESSORS

    @classmethod
    def get_supported_types(cls) -> List[DocumentType]:
        """
        Get all document types that have a processor.

        Returns:
            List[DocumentType]: Supported types in registration order
        """
        return list(cls._PROCESSORS.keys())

"""
Word Document Processor

Simulated processor for Word documents, tagging content the same way
the PDF processor does with its own prefix.
"""

from typing import List

from models.document import DocumentType

from .base import DocumentProcessor


class WordProcessor(DocumentProcessor):
    """
    Processor for Word documents.

    Implements the DocumentProcessor interface for the Word type only.
    """

    def get_supported_types(self) -> List[DocumentType]:
        """
        Get list of document types supported.

        Returns:
            List[DocumentType]: Supported document types
        """
        return [DocumentType.WORD]

    def get_tag(self) -> str:
        return "WORD Processed: "

    def get_display_name(self) -> str:
        return "Word"

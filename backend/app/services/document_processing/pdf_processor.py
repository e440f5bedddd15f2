"""
PDF Document Processor

Simulated processor for PDF documents. No parsing takes place: the
content is tagged to show it went through the PDF path.
"""

from typing import List

from models.document import DocumentType

from .base import DocumentProcessor


class PDFProcessor(DocumentProcessor):
    """Processor for PDF documents."""

    def get_supported_types(self) -> List[DocumentType]:
        return [DocumentType.PDF]

    def get_tag(self) -> str:
        return "PDF Processed: "

    def get_display_name(self) -> str:
        return "PDF"

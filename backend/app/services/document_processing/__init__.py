"""
Document Processing Package

Simulated processors for PDF and Word documents sharing one interface.

Main components:
- DocumentProcessor: Base abstract class defining the interface
- PDFProcessor, WordProcessor: Specific implementations
- DocumentProcessorFactory: Factory to create the processor for a document type
"""

from .base import DocumentProcessor
from .pdf_processor import PDFProcessor
from .word_processor import WordProcessor
from .factory import DocumentProcessorFactory

__all__ = [
    "DocumentProcessor",
    "PDFProcessor",
    "WordProcessor",
    "DocumentProcessorFactory"
]

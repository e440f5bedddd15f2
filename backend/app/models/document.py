"""
Document data model.

Plain record passed by reference through processors and storage
backends. Only ``content`` is ever changed after creation.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentType(str, Enum):
    """Closed set of document kinds handled by the system."""
    PDF = "Pdf"
    WORD = "Word"
    IMAGE = "Image"

    def __str__(self) -> str:
        return self.value


@dataclass
class Document:
    """
    A document moving through the processing pipeline.

    Attributes:
        title (str): Human readable label, never reassigned
        content (str): Text payload, mutated in place by processors
        type (DocumentType): Kind of document, fixed at creation
    """
    title: str
    content: str
    type: DocumentType

"""
Sample run of the document management system.

Builds the sample documents, wires processors and storage into
services, and prints every step to the console.
"""

import logging
from typing import List, Optional

from models.document import Document, DocumentType
from services.document_processing import DocumentProcessorFactory
from services.document_service import DocumentService
from services.storage import AwsStorage, LocalDiskStorage

logger = logging.getLogger(__name__)

APP_TITLE = "SOLID Document Management System"


def build_sample_documents() -> List[Document]:
    """Return the three sample documents in processing order."""
    return [
        Document(title="Annual Report", type=DocumentType.PDF, content="Financial data..."),
        Document(title="Project Proposal", type=DocumentType.WORD, content="Project details..."),
        Document(title="Profile Picture", type=DocumentType.IMAGE, content="Image data...")
    ]


def run(documents: Optional[List[Document]] = None) -> List[Document]:
    """
    Run documents through their services and print the transcript.

    PDF documents are additionally saved to local disk outside the
    service. Image documents have no service and are only reported.

    Args:
        documents (Optional[List[Document]]): Documents to handle, defaults to the samples

    Returns:
        List[Document]: The same documents, with processed content
    """
    if documents is None:
        documents = build_sample_documents()

    print(APP_TITLE)
    print("=" * 31 + "\n")

    pdf_processor = DocumentProcessorFactory.get_processor(DocumentType.PDF)
    word_processor = DocumentProcessorFactory.get_processor(DocumentType.WORD)

    aws_storage = AwsStorage()
    local_storage = LocalDiskStorage()

    pdf_service = DocumentService(pdf_processor, aws_storage)
    word_service = DocumentService(word_processor, aws_storage)

    logger.info(f"Handling {len(documents)} documents")

    for document in documents:
        print(f"\nProcessing {document.type.value} document: {document.title}")

        if document.type == DocumentType.PDF:
            pdf_service.handle_document(document)
        elif document.type == DocumentType.WORD:
            word_service.handle_document(document)
        else:
            print(f"No processor available for {document.type.value}")

        if document.type == DocumentType.PDF:
            local_storage.save_to_disk(document)

    print("\nProcessing complete!")
    return documents

"""
Simulated cloud storage backend.

Uploads are reported on the console; nothing leaves the process.
"""

import logging

from models.document import Document

from .base import CloudStorage

logger = logging.getLogger(__name__)


class AwsStorage(CloudStorage):
    """Cloud storage that announces uploads to AWS."""

    def upload(self, document: Document) -> None:
        print(f"Uploading {document.type.value} document '{document.title}' to AWS")
        logger.debug(f"Upload reported for '{document.title}' ({len(document.content)} characters)")

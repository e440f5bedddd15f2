"""
Simulated local disk storage backend.
"""

import logging

from models.document import Document

from .base import LocalStorage

logger = logging.getLogger(__name__)


class LocalDiskStorage(LocalStorage):
    """Local storage that announces saves to disk."""

    def save_to_disk(self, document: Document) -> None:
        print(f"Saving {document.type.value} document '{document.title}' to local disk")
        logger.debug(f"Local save reported for '{document.title}'")

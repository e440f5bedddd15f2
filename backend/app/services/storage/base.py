"""
Storage capabilities.

Cloud upload and local save are separate interfaces so a caller can
depend on only the one it needs. No storage backend implements both.
"""

from abc import ABC, abstractmethod

from models.document import Document


class CloudStorage(ABC):
    """Capability to upload a document to a cloud provider."""

    @abstractmethod
    def upload(self, document: Document) -> None:
        """
        Upload a document.

        Args:
            document (Document): Document to upload
        """
        pass


class LocalStorage(ABC):
    """Capability to save a document to local disk."""

    @abstractmethod
    def save_to_disk(self, document: Document) -> None:
        """
        Save a document to local disk.

        Args:
            document (Document): Document to save
        """
        pass

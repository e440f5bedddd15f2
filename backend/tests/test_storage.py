"""
Unit tests for the storage capabilities.
"""

import io
import os
import sys
import unittest
from contextlib import redirect_stdout

# Add the app directory to sys.path to import our modules
current_dir = os.path.dirname(__file__)
app_dir = os.path.join(current_dir, '..', 'app')
sys.path.insert(0, app_dir)

from models.document import Document, DocumentType
from services.storage import AwsStorage, CloudStorage, LocalDiskStorage, LocalStorage


class TestStorageBackends(unittest.TestCase):
    """Test cases for the simulated cloud and local backends."""

    def setUp(self):
        """Set up test fixtures."""
        self.document = Document(title="Annual Report", content="Financial data...", type=DocumentType.PDF)

    def test_upload_message(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            AwsStorage().upload(self.document)

        self.assertEqual(buffer.getvalue(), "Uploading Pdf document 'Annual Report' to AWS\n")

    def test_upload_names_aws_for_every_type(self):
        for document_type in DocumentType:
            with self.subTest(document_type=document_type):
                document = Document(title="Sample", content="data", type=document_type)
                buffer = io.StringIO()
                with redirect_stdout(buffer):
                    AwsStorage().upload(document)

                self.assertEqual(buffer.getvalue(), f"Uploading {document_type.value} document 'Sample' to AWS\n")

    def test_save_to_disk_message(self):
        document = Document(title="Project Proposal", content="Project details...", type=DocumentType.WORD)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            LocalDiskStorage().save_to_disk(document)

        self.assertEqual(buffer.getvalue(), "Saving Word document 'Project Proposal' to local disk\n")

    def test_storage_leaves_document_untouched(self):
        with redirect_stdout(io.StringIO()):
            AwsStorage().upload(self.document)
            LocalDiskStorage().save_to_disk(self.document)

        self.assertEqual(self.document.content, "Financial data...")


class TestCapabilityIsolation(unittest.TestCase):
    """Each backend exposes only its own capability."""

    def test_cloud_storage_cannot_save_to_disk(self):
        storage = AwsStorage()
        self.assertIsInstance(storage, CloudStorage)
        self.assertNotIsInstance(storage, LocalStorage)
        self.assertFalse(hasattr(storage, "save_to_disk"))

    def test_local_storage_cannot_upload(self):
        storage = LocalDiskStorage()
        self.assertIsInstance(storage, LocalStorage)
        self.assertNotIsInstance(storage, CloudStorage)
        self.assertFalse(hasattr(storage, "upload"))

    def test_capabilities_are_abstract(self):
        with self.assertRaises(TypeError):
            CloudStorage()
        with self.assertRaises(TypeError):
            LocalStorage()


if __name__ == '__main__':
    unittest.main()

"""
Storage package.

Separate cloud and local capabilities with one simulated backend each.
"""

from .base import CloudStorage, LocalStorage
from .cloud import AwsStorage
from .local import LocalDiskStorage

__all__ = [
    "CloudStorage",
    "LocalStorage",
    "AwsStorage",
    "LocalDiskStorage"
]

"""
Board I/O Interfaces Package

Exposes abstract interfaces that define contracts for the external stores.
"""

from boardio.interfaces.file_accessor_interface import FileAccessorInterface
from boardio.interfaces.property_store_interface import PropertyStoreInterface

# Public API (sorted alphabetically)
__all__ = [
    "FileAccessorInterface",
    "PropertyStoreInterface",
]

"""
Core module - shared protocols and types for the entire system.

USAGE:
------
from kvectordb.core import EmbeddingProvider, SearchResult

class MyEmbeddings:
    '''Implements EmbeddingProvider protocol.'''
    ...
"""

from kvectordb.core.errors import InvalidArgumentError
from kvectordb.core.protocols import (
    # Protocols
    EmbeddingProvider,
    VectorStore,
    # Data classes
    SearchResult,
)

__all__ = [
    # Protocols
    "EmbeddingProvider",
    "VectorStore",
    # Data classes
    "SearchResult",
    # Errors
    "InvalidArgumentError",
]

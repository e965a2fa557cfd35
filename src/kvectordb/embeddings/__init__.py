"""
Embeddings module - text embedding generation.

1. Protocol (EmbeddingProvider) defines the interface
2. Implementation (CharCodeEmbeddings)
3. Module-level embed() for standalone diagnostic use
4. Factory function (get_embedding_provider)
"""

from kvectordb.core.protocols import EmbeddingProvider
from kvectordb.embeddings.char_code_embeddings import (
    DEFAULT_DIMENSIONS,
    CharCodeEmbeddings,
    embed,
    get_embedding_provider,
)

__all__ = [
    "DEFAULT_DIMENSIONS",
    "EmbeddingProvider",
    "CharCodeEmbeddings",
    "embed",
    "get_embedding_provider",
]

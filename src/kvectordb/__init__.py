"""
kvectordb - a minimal in-memory vector similarity store.

Quick start:

    from kvectordb import get_vector_store

    store = get_vector_store()
    store.insert("d1", "vector databases")
    for doc, score in store.search("databases", limit=3):
        print(doc.id, f"{score:.4f}")
"""

from kvectordb.core import InvalidArgumentError, SearchResult
from kvectordb.embeddings import CharCodeEmbeddings, embed
from kvectordb.retrieval import (
    Document,
    InMemoryVectorStore,
    VectorStoreConfig,
    cosine_similarity,
    get_vector_store,
)

__version__ = "0.1.0"

__all__ = [
    "CharCodeEmbeddings",
    "Document",
    "InMemoryVectorStore",
    "InvalidArgumentError",
    "SearchResult",
    "VectorStoreConfig",
    "cosine_similarity",
    "embed",
    "get_vector_store",
]

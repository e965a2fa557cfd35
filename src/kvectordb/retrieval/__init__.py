"""
Retrieval module - vector similarity search.

This module provides:
- Document: The document model
- cosine_similarity / search_documents: The scoring and ranking engine
- VectorStoreConfig: Configuration for stores
- InMemoryVectorStore: The document store
- get_vector_store(): Factory function

ARCHITECTURE:
-------------
1. Protocol defines the contract (in core.protocols)
2. Store owns documents and delegates ranking to similarity.py
3. Factory function for instantiation
"""

# Document model
from kvectordb.retrieval.document import Document

# Scoring and ranking
from kvectordb.retrieval.similarity import (
    cosine_similarity,
    rank,
    score_documents,
    search_documents,
)

# Store and factory
from kvectordb.retrieval.store import (
    DEFAULT_LIMIT,
    VectorStoreConfig,
    InMemoryVectorStore,
    get_vector_store,
)

# Seed data
from kvectordb.retrieval.seeds import (
    get_sample_documents,
    get_sample_queries,
    seed_vector_store,
)

__all__ = [
    # Document
    "Document",
    # Engine
    "cosine_similarity",
    "rank",
    "score_documents",
    "search_documents",
    # Config
    "DEFAULT_LIMIT",
    "VectorStoreConfig",
    # Store
    "InMemoryVectorStore",
    "get_vector_store",
    # Seeds
    "get_sample_documents",
    "get_sample_queries",
    "seed_vector_store",
]

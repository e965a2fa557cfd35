"""
Vector store implementation and factory.

This module contains:
1. VectorStoreConfig - Configuration dataclass
2. InMemoryVectorStore - Append-only in-memory store with linear-scan search
3. get_vector_store() - Factory function

The store owns its documents. Vectors are computed by the injected
embedding provider at insert time, never supplied by the caller, so
every stored vector has the provider's dimension.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import dataclass

import numpy as np

from kvectordb.core import EmbeddingProvider, InvalidArgumentError, SearchResult
from kvectordb.embeddings import DEFAULT_DIMENSIONS
from kvectordb.observability import (
    SPAN_INSERT,
    SPAN_SEARCH,
    VECTORDB_CANDIDATE_COUNT,
    VECTORDB_RESULT_COUNT,
    VECTORDB_SEARCH_LIMIT,
    VECTORDB_STORE_SIZE,
    VECTORDB_TOP_SCORE,
    SpanProtocol,
    get_tracer,
    insert_attributes,
    search_attributes,
)
from kvectordb.retrieval.document import Document
from kvectordb.retrieval.similarity import search_documents

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


# ---------------------------------------------------------------------------
# CONFIGURATION
# ---------------------------------------------------------------------------


@dataclass
class VectorStoreConfig:
    """Configuration for the vector store.

    Environment Variables:
        KVECTORDB_EMBEDDING_DIM: Embedding vector length (default: 5)
        KVECTORDB_DEFAULT_LIMIT: Default number of search results (default: 5)
    """

    embedding_dim: int = DEFAULT_DIMENSIONS
    default_limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls) -> "VectorStoreConfig":
        """Load config from environment variables."""
        return cls(
            embedding_dim=int(os.environ.get("KVECTORDB_EMBEDDING_DIM", DEFAULT_DIMENSIONS)),
            default_limit=int(os.environ.get("KVECTORDB_DEFAULT_LIMIT", DEFAULT_LIMIT)),
        )


# ---------------------------------------------------------------------------
# IN-MEMORY STORE
# ---------------------------------------------------------------------------


class InMemoryVectorStore:
    """
    In-memory vector store ranked by cosine similarity.

    Documents are kept in insertion order and never updated or deleted.
    A single lock guards the internal list: insert appends under it,
    readers copy a snapshot under it and score outside it.
    """

    def __init__(self, embeddings: EmbeddingProvider):
        """
        Initialize with injected embedding provider.

        Args:
            embeddings: Embedding provider for generating vectors
        """
        self._embeddings = embeddings
        self._documents: list[Document] = []
        self._lock = threading.Lock()

    @property
    def dimensions(self) -> int:
        return self._embeddings.dimensions

    def insert(self, doc_id: str, text: str) -> Document:
        """
        Embed text and append a new document.

        Duplicate ids are allowed and coexist. Returns the stored
        document, which is immutable.
        """
        tracer = get_tracer()
        with tracer.start_span(
            SPAN_INSERT, attributes=insert_attributes(doc_id, text, self.dimensions)
        ) as span:
            doc = Document(id=doc_id, text=text, vector=self._embeddings.embed(text))

            with self._lock:
                self._documents.append(doc)
                size = len(self._documents)

            span.set_attribute(VECTORDB_STORE_SIZE, size)
            logger.debug(f"Inserted document {doc_id!r} (store size: {size})")
            return doc

    def all_documents(self) -> list[Document]:
        """Snapshot of every document in insertion order."""
        with self._lock:
            return list(self._documents)

    def size(self) -> int:
        with self._lock:
            return len(self._documents)

    def __len__(self) -> int:
        return self.size()

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchResult]:
        """
        Rank stored documents against query text.

        Args:
            query: Query text (may be empty, which scores 0.0 everywhere)
            limit: Maximum number of results

        Returns:
            Up to ``limit`` results, best first, ties in insertion order
        """
        tracer = get_tracer()
        with tracer.start_span(
            SPAN_SEARCH, attributes=search_attributes(query, limit, self.dimensions)
        ) as span:
            query_vector = self._embeddings.embed(query)
            return self._search(query_vector, limit, span)

    def search_by_vector(
        self,
        query_vector: np.ndarray,
        limit: int = DEFAULT_LIMIT,
    ) -> list[SearchResult]:
        """Rank stored documents against a precomputed query vector."""
        tracer = get_tracer()
        with tracer.start_span(SPAN_SEARCH, attributes={VECTORDB_SEARCH_LIMIT: limit}) as span:
            return self._search(np.asarray(query_vector, dtype=np.float64), limit, span)

    def _search(
        self,
        query_vector: np.ndarray,
        limit: int,
        span: SpanProtocol,
    ) -> list[SearchResult]:
        candidates = self.all_documents()
        span.set_attribute(VECTORDB_CANDIDATE_COUNT, len(candidates))

        try:
            results = search_documents(query_vector, candidates, limit)
        except InvalidArgumentError as e:
            span.record_error(e)
            raise

        span.set_attribute(VECTORDB_RESULT_COUNT, len(results))
        if results:
            span.set_attribute(VECTORDB_TOP_SCORE, results[0].score)

        logger.debug(
            f"Search ranked {len(candidates)} documents, returning {len(results)}"
        )
        return results


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_vector_store(
    embeddings: EmbeddingProvider | None = None,
    config: VectorStoreConfig | None = None,
) -> InMemoryVectorStore:
    """
    Factory function to get a vector store.

    Args:
        embeddings: Embedding provider (will create one if not provided)
        config: Store configuration (read from env if not provided)

    Returns:
        InMemoryVectorStore
    """
    if embeddings is None:
        from kvectordb.embeddings import get_embedding_provider

        config = config or VectorStoreConfig.from_env()
        embeddings = get_embedding_provider(dimensions=config.embedding_dim)

    return InMemoryVectorStore(embeddings)

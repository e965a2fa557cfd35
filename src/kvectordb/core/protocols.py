"""
Core protocols defining contracts for the vector database.

PATTERN:
- Protocol defines the contract
- Concrete classes implement it (CharCodeEmbeddings, InMemoryVectorStore)
- Factory functions handle instantiation
- Tests inject MagicMock providers where a real one is not needed
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from kvectordb.retrieval.document import Document


# ---------------------------------------------------------------------------
# EMBEDDING PROVIDER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class EmbeddingProvider(Protocol):
    """
    Contract for embedding generation.

    Implementations:
    - CharCodeEmbeddings (deterministic character-code hash)
    """

    @property
    def dimensions(self) -> int:
        """Length of every vector this provider returns."""
        ...

    def embed(self, text: str) -> np.ndarray:
        """Generate embedding for a single text."""
        ...

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings for multiple texts."""
        ...


# ---------------------------------------------------------------------------
# VECTOR STORE PROTOCOL
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchResult:
    """
    A stored document paired with its similarity to a query.

    Produced fresh per query, never persisted. Unpacks like a tuple:

        for doc, score in store.search("query"):
            ...
    """
    document: Document
    score: float

    def __iter__(self) -> Iterator:
        yield self.document
        yield self.score


@runtime_checkable
class VectorStore(Protocol):
    """
    Contract for vector similarity search.

    Implementations:
    - InMemoryVectorStore
    """

    def insert(self, doc_id: str, text: str) -> Document:
        """Embed text and append a new document."""
        ...

    def all_documents(self) -> list[Document]:
        """Snapshot of every document in insertion order."""
        ...

    def size(self) -> int:
        """Number of stored documents."""
        ...

    def search(self, query: str, limit: int = 5) -> list[SearchResult]:
        """Rank stored documents against query text."""
        ...

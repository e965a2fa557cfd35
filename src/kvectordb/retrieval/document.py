"""
Document model for the retrieval system.

Single responsibility: Define the structure of documents
stored in vector stores.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Document:
    """
    A document with its precomputed embedding.

    Immutable once built: the dataclass is frozen and the vector is a
    read-only float64 array. Equality is strict over id, text and every
    vector component (no tolerance), meant for deterministic tests rather
    than fuzzy duplicate detection.

    Stored documents come only from InMemoryVectorStore.insert, which
    computes the vector itself; the store has no way to accept a
    prebuilt Document. Direct construction is for tests and diagnostics
    (for example a document of the wrong dimension) and puts nothing in
    any store.
    """
    id: str
    text: str
    vector: np.ndarray

    def __post_init__(self) -> None:
        vector = np.array(self.vector, dtype=np.float64)
        vector.setflags(write=False)
        object.__setattr__(self, "vector", vector)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Document):
            return NotImplemented
        return (
            self.id == other.id
            and self.text == other.text
            and np.array_equal(self.vector, other.vector)
        )

    def __hash__(self) -> int:
        return hash((self.id, self.text, tuple(self.vector.tolist())))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "text": self.text,
            "vector": self.vector.tolist(),
        }

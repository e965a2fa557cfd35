"""
Embeddings Module - Single Responsibility: Generate text embeddings.

It has ONE job: convert text to fixed-length vectors.

The provider here is a placeholder, not a semantic model. It hashes the
character codes of the text into N position buckets and unit-normalizes
the result. The arithmetic is fixed so vectors stay comparable across
implementations and test fixtures:

    acc[i % N] += ord(text.lower()[i]) / 1000.0
    vector = acc / |acc|        (zero vector when |acc| == 0)
"""

from __future__ import annotations

import math

import numpy as np

from kvectordb.core.errors import InvalidArgumentError
from kvectordb.core.protocols import EmbeddingProvider

DEFAULT_DIMENSIONS = 5


class CharCodeEmbeddings:
    """
    Deterministic character-code embedding provider.

    Stateless apart from its dimension, so one instance can be shared by
    a store and ad-hoc diagnostic calls without synchronization.
    """

    def __init__(self, dimensions: int = DEFAULT_DIMENSIONS):
        if dimensions <= 0:
            raise InvalidArgumentError(
                f"Embedding dimensions must be positive, got {dimensions}"
            )
        self._dimensions = dimensions

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def embed(self, text: str) -> np.ndarray:
        """Generate a unit vector (or the zero vector) for text."""
        acc = [0.0] * self._dimensions

        for i, char in enumerate(text.lower()):
            acc[i % self._dimensions] += ord(char) / 1000.0

        # Plain left-to-right addition; sum() compensates rounding on 3.12+
        squares = 0.0
        for x in acc:
            squares += x * x
        magnitude = math.sqrt(squares)
        if magnitude > 0:
            acc = [x / magnitude for x in acc]

        vector = np.array(acc, dtype=np.float64)
        vector.setflags(write=False)
        return vector

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate embeddings for multiple texts."""
        return [self.embed(text) for text in texts]


_default_provider = CharCodeEmbeddings()


def embed(text: str) -> np.ndarray:
    """Embed text with the default provider (N = 5). Diagnostic helper."""
    return _default_provider.embed(text)


def get_embedding_provider(dimensions: int | None = None) -> EmbeddingProvider:
    """
    Factory function to get an embedding provider.

    Args:
        dimensions: Vector length (defaults to DEFAULT_DIMENSIONS)
    """
    if dimensions is None or dimensions == DEFAULT_DIMENSIONS:
        return _default_provider
    return CharCodeEmbeddings(dimensions)

"""
Similarity search engine - scoring and ranking.

Linear scan, then sort:
1. Score every candidate against the query vector (cosine similarity)
2. Stable sort by score descending, so ties keep insertion order
3. Truncate to the requested limit

Scoring finishes for every candidate before anything is sorted, so a
dimension mismatch aborts the whole call instead of leaking a partial
ranking.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from kvectordb.core.errors import InvalidArgumentError
from kvectordb.core.protocols import SearchResult
from kvectordb.retrieval.document import Document


def cosine_similarity(a: Sequence[float] | np.ndarray, b: Sequence[float] | np.ndarray) -> float:
    """
    Cosine of the angle between two vectors.

    Returns exactly 0.0 when either vector has zero magnitude, so the
    zero vector of an empty text never produces NaN. Results are not
    clamped to [-1, 1].

    Raises:
        InvalidArgumentError: If the vectors differ in length
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    if len(a) != len(b):
        raise InvalidArgumentError(
            f"Vectors must have the same dimension: {len(a)} != {len(b)}"
        )

    dot = float(np.dot(a, b))
    norm_a = float(np.dot(a, a))
    norm_b = float(np.dot(b, b))

    if norm_a <= 0.0 or norm_b <= 0.0:
        return 0.0

    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))


def score_documents(
    query_vector: np.ndarray,
    documents: Iterable[Document],
) -> list[SearchResult]:
    """Score every document against the query vector, preserving order."""
    return [
        SearchResult(document=doc, score=cosine_similarity(query_vector, doc.vector))
        for doc in documents
    ]


def rank(results: list[SearchResult], limit: int) -> list[SearchResult]:
    """
    Sort by score descending and keep the first ``limit`` entries.

    list.sort is stable (also with reverse=True), so equal scores stay in
    the order they were given. A limit of zero or below returns [].
    """
    if limit <= 0:
        return []

    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    return ranked[:limit]


def search_documents(
    query_vector: np.ndarray,
    documents: Iterable[Document],
    limit: int = 5,
) -> list[SearchResult]:
    """Score, rank and truncate in one call."""
    return rank(score_documents(query_vector, documents), limit)

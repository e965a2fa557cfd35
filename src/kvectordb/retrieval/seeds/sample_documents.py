"""
Sample documents and queries for demos and smoke tests.

The texts are the Italian sentences of the reference demo program, kept
verbatim (accents included) so ``kvectordb demo`` ranks and scores them
exactly as that program does. In English they read roughly: "vector
databases are useful for semantic search", "search engines use embedding
technologies", and so on.

The embedding is a character-code hash, so rankings over them are
reproducible but carry no semantic meaning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kvectordb.core import VectorStore
    from kvectordb.retrieval.document import Document


def get_sample_documents() -> list[tuple[str, str]]:
    """Get the ``(id, text)`` pairs used by the demo."""
    return [
        ("doc1", "I database vettoriali sono utili per la ricerca semantica"),
        ("doc2", "I motori di ricerca utilizzano tecnologie di embedding"),
        ("doc3", "L'intelligenza artificiale rivoluziona il recupero delle informazioni"),
        ("doc4", "Le reti neurali generano embedding di alta qualità"),
        ("doc5", "La similarità coseno misura quanto due vettori sono simili"),
    ]


def get_sample_queries() -> list[str]:
    """Get the queries the demo runs against the sample documents."""
    return [
        "database semantici",
        "intelligenza artificiale e reti neurali",
        "similarità tra vettori",
    ]


def seed_vector_store(store: VectorStore) -> list[Document]:
    """
    Insert the sample documents into a store.

    Args:
        store: Any VectorStore implementation

    Returns:
        The stored documents, in insertion order
    """
    return [store.insert(doc_id, text) for doc_id, text in get_sample_documents()]

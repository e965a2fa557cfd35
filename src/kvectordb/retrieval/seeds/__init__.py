"""
Seed data for the retrieval system.

Separating data from infrastructure keeps demos and tests on the same
controlled content.
"""

from kvectordb.retrieval.seeds.sample_documents import (
    get_sample_documents,
    get_sample_queries,
    seed_vector_store,
)

__all__ = ["get_sample_documents", "get_sample_queries", "seed_vector_store"]

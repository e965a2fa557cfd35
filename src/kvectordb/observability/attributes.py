"""
Semantic Conventions for Span Attributes

Attribute keys for vector database spans, in a custom ``vectordb``
namespace.
"""

from typing import Any

# ---------------------------------------------------------------------------
# SPAN NAMES
# ---------------------------------------------------------------------------

SPAN_INSERT = "vectordb.insert"
SPAN_SEARCH = "vectordb.search"

# ---------------------------------------------------------------------------
# VECTORDB NAMESPACE (custom)
# ---------------------------------------------------------------------------

VECTORDB_EMBEDDING_DIM = "vectordb.embedding.dim"

# Insert
VECTORDB_DOCUMENT_ID = "vectordb.document.id"
VECTORDB_DOCUMENT_TEXT_LENGTH = "vectordb.document.text_length"
VECTORDB_STORE_SIZE = "vectordb.store.size"

# Search
VECTORDB_QUERY_LENGTH = "vectordb.query.length"
VECTORDB_SEARCH_LIMIT = "vectordb.search.limit"
VECTORDB_CANDIDATE_COUNT = "vectordb.search.candidate_count"
VECTORDB_RESULT_COUNT = "vectordb.search.result_count"
VECTORDB_TOP_SCORE = "vectordb.search.top_score"


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------


def insert_attributes(doc_id: str, text: str, dimensions: int) -> dict[str, Any]:
    """Build initial attributes for an insert span."""
    return {
        VECTORDB_DOCUMENT_ID: doc_id,
        VECTORDB_DOCUMENT_TEXT_LENGTH: len(text),
        VECTORDB_EMBEDDING_DIM: dimensions,
    }


def search_attributes(query: str, limit: int, dimensions: int) -> dict[str, Any]:
    """Build initial attributes for a search span."""
    return {
        VECTORDB_QUERY_LENGTH: len(query),
        VECTORDB_SEARCH_LIMIT: limit,
        VECTORDB_EMBEDDING_DIM: dimensions,
    }

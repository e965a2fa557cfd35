"""
Unit Tests for Retrieval Store

Tests the vector store protocol and InMemoryVectorStore behavior.

PATTERNS:
---------
1. Test through the protocol interface
2. Mock embeddings where exact vectors matter
3. Verify search behavior and ranking
"""

import dataclasses
from unittest.mock import MagicMock

import numpy as np
import pytest

from kvectordb.core import InvalidArgumentError, SearchResult, VectorStore
from kvectordb.embeddings import CharCodeEmbeddings, embed
from kvectordb.retrieval.document import Document
from kvectordb.retrieval.seeds import get_sample_documents, get_sample_queries, seed_vector_store
from kvectordb.retrieval.store import (
    InMemoryVectorStore,
    VectorStoreConfig,
    get_vector_store,
)


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_embeddings():
    """Create mock embeddings provider."""
    embeddings = MagicMock()
    embeddings.dimensions = 3

    def mock_embed(text):
        # Simple mock: different vectors based on text content
        if "thyroid" in text.lower():
            return np.array([1.0, 0.0, 0.0])
        elif "cholesterol" in text.lower():
            return np.array([0.0, 1.0, 0.0])
        elif text == "":
            return np.array([0.0, 0.0, 0.0])
        else:
            return np.array([0.0, 0.0, 1.0])

    embeddings.embed.side_effect = mock_embed
    return embeddings


@pytest.fixture
def store():
    """Create an empty store with the real embedding provider."""
    return InMemoryVectorStore(CharCodeEmbeddings())


@pytest.fixture
def seeded_store(store):
    """Create a store with the sample documents."""
    seed_vector_store(store)
    return store


# ---------------------------------------------------------------------------
# BASIC OPERATIONS
# ---------------------------------------------------------------------------


class TestInMemoryVectorStore:
    """Test InMemoryVectorStore basic operations."""

    def test_new_store_is_empty(self, store):
        """A new store holds no documents."""
        assert store.size() == 0
        assert len(store) == 0
        assert store.all_documents() == []

    def test_insert_returns_stored_document(self, store):
        """insert should return the document it appended."""
        doc = store.insert("d1", "Hello World")

        assert doc.id == "d1"
        assert doc.text == "Hello World"
        assert np.array_equal(doc.vector, embed("Hello World"))
        assert store.all_documents()[0] is doc

    def test_insert_keeps_text_verbatim(self, store):
        """Text is stored as given, not lower-cased or trimmed."""
        doc = store.insert("d1", "  MiXeD Case  ")

        assert doc.text == "  MiXeD Case  "

    def test_insert_embeds_once_per_document(self, mock_embeddings):
        """The provider is called exactly once per insert."""
        store = InMemoryVectorStore(mock_embeddings)

        store.insert("a", "thyroid")
        store.insert("b", "cholesterol")

        assert mock_embeddings.embed.call_count == 2

    def test_insert_empty_text(self, store):
        """Empty text is a valid document with a zero vector."""
        doc = store.insert("empty", "")

        assert doc.vector.tolist() == [0.0] * 5
        assert store.size() == 1

    def test_duplicate_ids_coexist(self, store):
        """The store does not enforce id uniqueness."""
        store.insert("same", "first")
        store.insert("same", "second")

        assert store.size() == 2
        assert [d.text for d in store.all_documents()] == ["first", "second"]

    def test_insertion_order_preserved(self, seeded_store):
        """all_documents returns documents in insertion order."""
        ids = [d.id for d in seeded_store.all_documents()]

        assert ids == [doc_id for doc_id, _ in get_sample_documents()]

    def test_all_documents_is_a_snapshot(self, seeded_store):
        """Mutating the returned list must not affect the store."""
        docs = seeded_store.all_documents()
        docs.clear()

        assert seeded_store.size() == 5
        assert len(seeded_store.all_documents()) == 5

    def test_snapshot_does_not_see_later_inserts(self, store):
        """A snapshot is fixed at the time it was taken."""
        store.insert("a", "one")
        snapshot = store.all_documents()

        store.insert("b", "two")

        assert len(snapshot) == 1
        assert store.size() == 2

    def test_dimensions_from_provider(self, mock_embeddings):
        """The store reports its provider's dimension."""
        assert InMemoryVectorStore(mock_embeddings).dimensions == 3


# ---------------------------------------------------------------------------
# DOCUMENT MODEL
# ---------------------------------------------------------------------------


class TestDocument:
    """Test Document dataclass."""

    def test_documents_with_same_fields_are_equal(self):
        """Equality is structural over id, text and vector."""
        a = Document(id="x", text="abc", vector=embed("abc"))
        b = Document(id="x", text="abc", vector=embed("abc"))

        assert a == b
        assert hash(a) == hash(b)

    def test_different_id_not_equal(self):
        """Documents differing only in id are not equal."""
        assert Document("x", "abc", embed("abc")) != Document("y", "abc", embed("abc"))

    def test_different_vector_not_equal(self):
        """Equality is strict, with no floating-point tolerance."""
        a = Document("x", "abc", [0.1, 0.2])
        b = Document("x", "abc", [0.1, 0.2 + 1e-15])

        assert a != b

    def test_not_equal_to_other_types(self):
        """Comparing with a non-document is simply False."""
        assert Document("x", "abc", embed("abc")) != ("x", "abc")

    def test_document_is_frozen(self):
        """Fields cannot be reassigned."""
        doc = Document("x", "abc", embed("abc"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.text = "changed"

    def test_vector_is_read_only(self):
        """The vector cannot be mutated in place."""
        doc = Document("x", "abc", [1.0, 2.0])

        with pytest.raises(ValueError):
            doc.vector[0] = 5.0

    def test_vector_is_copied(self):
        """Changing the source array does not reach the document."""
        source = np.array([1.0, 2.0])
        doc = Document("x", "abc", source)

        source[0] = 9.0

        assert doc.vector.tolist() == [1.0, 2.0]

    def test_to_dict(self):
        """to_dict should expose plain Python values."""
        doc = Document("x", "abc", [1.0, 0.0])

        assert doc.to_dict() == {"id": "x", "text": "abc", "vector": [1.0, 0.0]}


# ---------------------------------------------------------------------------
# SEARCH
# ---------------------------------------------------------------------------


class TestSearch:
    """Test search results and ranking."""

    def test_search_empty_store(self, store):
        """Search on empty store should return empty list."""
        assert store.search("anything", limit=5) == []

    def test_search_returns_search_results(self, seeded_store):
        """Results should be SearchResult pairs that unpack."""
        results = seeded_store.search("vectors")

        assert all(isinstance(r, SearchResult) for r in results)
        doc, score = results[0]
        assert isinstance(doc, Document)
        assert isinstance(score, float)

    def test_default_limit_is_five(self, store):
        """Without a limit, at most five results come back."""
        for i in range(8):
            store.insert(f"d{i}", f"document number {i}")

        assert len(store.search("document")) == 5

    def test_exact_match_ranks_first(self, store):
        """A document whose text equals the query scores ~1.0 at rank 1."""
        store.insert("d1", "cab")
        store.insert("d2", "abc")

        results = store.search("cab", limit=5)

        assert results[0].document.id == "d1"
        assert results[0].score == pytest.approx(1.0)
        assert results[1].document.id == "d2"
        assert results[1].score < results[0].score

    def test_anagram_is_not_identical(self, store):
        """Position-indexed accumulation separates 'cab' from 'abc'."""
        store.insert("d2", "abc")

        score = store.search("cab")[0].score

        assert 0.99 < score < 1.0

    def test_empty_stored_document_scores_zero(self, store):
        """A zero-vector document scores exactly 0.0 against any query."""
        store.insert("empty", "")

        results = store.search("x", limit=5)

        assert len(results) == 1
        assert results[0].document.id == "empty"
        assert results[0].score == 0.0

    def test_empty_query_scores_zero_everywhere(self, seeded_store):
        """An empty query ranks every document at 0.0 in insertion order."""
        results = seeded_store.search("", limit=5)

        assert [r.score for r in results] == [0.0] * 5
        assert [r.document.id for r in results] == ["doc1", "doc2", "doc3", "doc4", "doc5"]

    def test_ties_keep_insertion_order(self, store):
        """Documents with equal scores come back in insertion order."""
        store.insert("first", "abc")
        store.insert("other", "xyz")
        store.insert("second", "abc")

        results = store.search("abc", limit=3)

        assert [r.document.id for r in results] == ["first", "second", "other"]
        assert results[0].score == results[1].score

    def test_sorted_descending(self, seeded_store):
        """Scores should never increase down the ranking."""
        for query in get_sample_queries():
            scores = [r.score for r in seeded_store.search(query, limit=5)]
            assert scores == sorted(scores, reverse=True)

    def test_full_ranking_contains_every_document(self, seeded_store):
        """search(Q, n) returns each of the n documents exactly once."""
        results = seeded_store.search("database semantici", limit=5)

        assert sorted(r.document.id for r in results) == ["doc1", "doc2", "doc3", "doc4", "doc5"]

    @pytest.mark.parametrize("k", [0, 1, 2, 3, 4, 5])
    def test_top_k_is_prefix_of_full_ranking(self, seeded_store, k):
        """search(Q, k) is the first k entries of the full ranking."""
        full = seeded_store.search("similarità tra vettori", limit=5)

        assert seeded_store.search("similarità tra vettori", limit=k) == full[:k]

    def test_limit_larger_than_store(self, seeded_store):
        """A limit above the store size returns everything."""
        assert len(seeded_store.search("query", limit=50)) == 5

    def test_negative_limit_returns_empty(self, seeded_store):
        """A negative limit is treated like zero."""
        assert seeded_store.search("query", limit=-2) == []

    def test_search_does_not_change_store(self, seeded_store):
        """Searching is read-only."""
        before = seeded_store.all_documents()

        seeded_store.search("vectors", limit=2)

        assert seeded_store.all_documents() == before

    def test_relevant_docs_ranked_higher(self, mock_embeddings):
        """Documents matching the query direction rank first."""
        store = InMemoryVectorStore(mock_embeddings)
        store.insert("cholesterol-001", "LDL cholesterol affects heart health.")
        store.insert("thyroid-001", "TSH controls thyroid function.")
        store.insert("other-001", "Vitamin D and bones.")

        results = store.search("thyroid TSH", limit=3)

        assert results[0].document.id == "thyroid-001"
        assert results[0].score == pytest.approx(1.0)
        assert [r.score for r in results[1:]] == [0.0, 0.0]
        assert [r.document.id for r in results[1:]] == ["cholesterol-001", "other-001"]


# ---------------------------------------------------------------------------
# SEARCH BY VECTOR
# ---------------------------------------------------------------------------


class TestSearchByVector:
    """Test search_by_vector and dimension mismatch handling."""

    def test_matches_text_search(self, seeded_store):
        """Searching by embed(q) equals searching by q."""
        query = "neural networks"

        assert seeded_store.search_by_vector(embed(query), limit=5) == seeded_store.search(query, limit=5)

    def test_mismatched_query_raises(self, seeded_store):
        """A query vector of the wrong length aborts the search."""
        with pytest.raises(InvalidArgumentError):
            seeded_store.search_by_vector(np.ones(3), limit=5)

    def test_mismatch_leaves_store_intact(self, seeded_store):
        """A failed search must not corrupt store state."""
        before = seeded_store.all_documents()

        with pytest.raises(InvalidArgumentError):
            seeded_store.search_by_vector([1.0, 0.0], limit=5)

        assert seeded_store.all_documents() == before
        assert len(seeded_store.search("vectors", limit=5)) == 5

    def test_mismatch_on_empty_store_returns_empty(self, store):
        """With nothing to compare against there is no mismatch."""
        assert store.search_by_vector([1.0, 0.0], limit=5) == []


# ---------------------------------------------------------------------------
# CONFIGURATION AND FACTORY
# ---------------------------------------------------------------------------


class TestVectorStoreConfig:
    """Test configuration loading."""

    def test_config_defaults(self, monkeypatch):
        """Defaults apply when env vars are not set."""
        monkeypatch.delenv("KVECTORDB_EMBEDDING_DIM", raising=False)
        monkeypatch.delenv("KVECTORDB_DEFAULT_LIMIT", raising=False)

        config = VectorStoreConfig.from_env()

        assert config.embedding_dim == 5
        assert config.default_limit == 5

    def test_config_from_env(self, monkeypatch):
        """Config should read values from env."""
        monkeypatch.setenv("KVECTORDB_EMBEDDING_DIM", "8")
        monkeypatch.setenv("KVECTORDB_DEFAULT_LIMIT", "3")

        config = VectorStoreConfig.from_env()

        assert config.embedding_dim == 8
        assert config.default_limit == 3


class TestGetVectorStore:
    """Test the get_vector_store factory function."""

    def test_uses_injected_embeddings(self, mock_embeddings):
        """Factory should wrap the given provider."""
        store = get_vector_store(embeddings=mock_embeddings)

        store.insert("a", "thyroid")

        mock_embeddings.embed.assert_called_once_with("thyroid")

    def test_builds_provider_from_config(self):
        """Without a provider, the config dimension is used."""
        store = get_vector_store(config=VectorStoreConfig(embedding_dim=7))

        assert store.dimensions == 7
        assert store.insert("a", "abc").vector.shape == (7,)

    def test_builds_provider_from_env(self, monkeypatch):
        """Without provider or config, env decides the dimension."""
        monkeypatch.setenv("KVECTORDB_EMBEDDING_DIM", "4")

        assert get_vector_store().dimensions == 4


# ---------------------------------------------------------------------------
# PROTOCOL COMPLIANCE
# ---------------------------------------------------------------------------


class TestProtocolCompliance:
    """Test that InMemoryVectorStore implements VectorStore protocol."""

    def test_is_vector_store(self, store):
        """Store should satisfy the runtime-checkable protocol."""
        assert isinstance(store, VectorStore)

    def test_search_returns_list(self, seeded_store):
        """Search should return a list."""
        assert isinstance(seeded_store.search("test", limit=5), list)

    def test_documents_enter_only_through_insert(self, store):
        """A hand-built document cannot be added; insert computes the vector."""
        Document(id="manual", text="abc", vector=[1.0, 0.0])

        assert not hasattr(store, "insert_document")
        assert store.all_documents() == []

        stored = store.insert("manual", "abc")
        assert np.array_equal(stored.vector, embed("abc"))


# ---------------------------------------------------------------------------
# SEED DATA
# ---------------------------------------------------------------------------


class TestSeeds:
    """Test the sample data helpers."""

    def test_seed_returns_stored_documents(self, store):
        """seed_vector_store returns what it inserted, in order."""
        docs = seed_vector_store(store)

        assert docs == store.all_documents()
        assert len(docs) == len(get_sample_documents())

    def test_sample_queries(self):
        """There are three demo queries."""
        assert len(get_sample_queries()) == 3

    def test_sample_texts_kept_verbatim(self):
        """Sample texts keep their original wording and accents."""
        texts = dict(get_sample_documents())

        assert texts["doc1"] == "I database vettoriali sono utili per la ricerca semantica"
        assert texts["doc5"] == "La similarità coseno misura quanto due vettori sono simili"
        assert get_sample_queries()[2] == "similarità tra vettori"

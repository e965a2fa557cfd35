"""
CLI commands - thin wrappers around the vector store.

Each command follows a consistent pattern:
1. Parse arguments
2. Build a store
3. Run the operation
4. Print results
5. Return exit code

Scores are printed with four fractional digits.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from kvectordb.core import SearchResult


def _load_env() -> None:
    """Load environment variables from .env file and configure logging."""
    load_dotenv()
    level = os.environ.get("KVECTORDB_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_doc(value: str) -> tuple[str, str]:
    """argparse type for ``ID=TEXT`` document arguments."""
    doc_id, sep, text = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected ID=TEXT, got {value!r}")
    return doc_id, text


def _default_limit() -> int:
    from kvectordb.retrieval import VectorStoreConfig

    return VectorStoreConfig.from_env().default_limit


def format_results(results: list[SearchResult]) -> list[str]:
    """Render ranked results as numbered lines."""
    return [
        f"{rank}. [ID: {doc.id}, Score: {score:.4f}] {doc.text}"
        for rank, (doc, score) in enumerate(results, start=1)
    ]


def _build_store(docs: list[tuple[str, str]]):
    from kvectordb.retrieval import get_vector_store

    store = get_vector_store()
    for doc_id, text in docs:
        store.insert(doc_id, text)
    return store


def run_demo_cli() -> int:
    """Seed the sample documents and run the sample queries."""
    from kvectordb.retrieval import get_vector_store, get_sample_queries, seed_vector_store

    parser = argparse.ArgumentParser(description="Run the sample search demo")
    parser.add_argument("--limit", type=int, default=_default_limit(), help="Results per query")
    args = parser.parse_args()

    store = get_vector_store()

    print("Adding documents to the database...")
    seed_vector_store(store)
    print(f"Documents in the database: {store.size()}")

    for i, query in enumerate(get_sample_queries(), start=1):
        print(f"\nSearch {i}: '{query}'")
        for line in format_results(store.search(query, limit=args.limit)):
            print(line)

    return 0


def run_search_cli() -> int:
    """Build a store from --doc arguments and rank them against a query."""
    parser = argparse.ArgumentParser(description="Rank documents against a query")
    parser.add_argument("query", help="Query text")
    parser.add_argument(
        "--doc",
        action="append",
        type=_parse_doc,
        default=[],
        metavar="ID=TEXT",
        help="Document to insert (repeatable)",
    )
    parser.add_argument("--limit", type=int, default=_default_limit(), help="Maximum results")
    args = parser.parse_args()

    store = _build_store(args.doc)
    for line in format_results(store.search(args.query, limit=args.limit)):
        print(line)

    return 0


def run_documents_cli() -> int:
    """List documents in insertion order."""
    parser = argparse.ArgumentParser(description="List documents")
    parser.add_argument(
        "--doc",
        action="append",
        type=_parse_doc,
        default=[],
        metavar="ID=TEXT",
        help="Document to insert (repeatable)",
    )
    args = parser.parse_args()

    store = _build_store(args.doc)
    for doc in store.all_documents():
        print(f"Document ID: {doc.id}, Text: {doc.text}")

    return 0


def run_embed_cli() -> int:
    """Print the embedding of a text."""
    from kvectordb.embeddings import get_embedding_provider
    from kvectordb.retrieval import VectorStoreConfig

    parser = argparse.ArgumentParser(description="Print the embedding of a text")
    parser.add_argument("text", help="Text to embed")
    args = parser.parse_args()

    provider = get_embedding_provider(dimensions=VectorStoreConfig.from_env().embedding_dim)
    vector = provider.embed(args.text)
    print("[" + ", ".join(f"{x:.4f}" for x in vector) + "]")

    return 0


def main() -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        kvectordb demo                          # Sample documents and queries
        kvectordb search QUERY --doc ID=TEXT    # Rank ad-hoc documents
        kvectordb documents --doc ID=TEXT       # List documents
        kvectordb embed TEXT                    # Show an embedding
    """
    _load_env()

    parser = argparse.ArgumentParser(
        description="Minimal in-memory vector database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  demo        Insert the sample documents and run the sample queries
  search      Rank documents given with --doc against a query
  documents   List documents given with --doc
  embed       Print the embedding vector of a text

Examples:
  kvectordb demo --limit 3
  kvectordb search "cab" --doc d1=cab --doc d2=abc
  kvectordb embed "hello"
        """,
    )

    parser.add_argument(
        "command",
        choices=["demo", "search", "documents", "embed"],
        help="Command to run",
    )

    args, remaining = parser.parse_known_args()

    commands = {
        "demo": run_demo_cli,
        "search": run_search_cli,
        "documents": run_documents_cli,
        "embed": run_embed_cli,
    }

    # Re-inject remaining args for the subcommand
    sys.argv = [sys.argv[0]] + remaining

    from kvectordb.observability import init_tracing, shutdown_tracing

    init_tracing()
    try:
        return commands[args.command]()
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    finally:
        shutdown_tracing()


if __name__ == "__main__":
    sys.exit(main())

"""
CLI module - command-line interface.

Provides entry points for:
- Running the sample demo
- Ranking ad-hoc documents against a query
- Listing documents
- Printing embeddings
"""

from kvectordb.cli.commands import (
    main,
    format_results,
    run_demo_cli,
    run_search_cli,
    run_documents_cli,
    run_embed_cli,
)

__all__ = [
    "main",
    "format_results",
    "run_demo_cli",
    "run_search_cli",
    "run_documents_cli",
    "run_embed_cli",
]

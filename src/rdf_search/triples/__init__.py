"""Triple store subsystem.

This module provides:
- Immutable triples, wildcard patterns and per-subject result beans
- An indexed in-memory store
- A small query engine (patterns + a restricted single-pattern SELECT)
- The collapse step that groups matched triples by subject
"""

from .aggregate import collapse
from .models import ANY, Bean, Pattern, Triple
from .query_engine import QueryEngine
from .store import TripleStore

__all__ = ["ANY", "Bean", "Pattern", "Triple", "TripleStore", "QueryEngine", "collapse"]

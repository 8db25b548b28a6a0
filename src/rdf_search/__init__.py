"""
RDF Search - one queryable view over many RDF sources
"""

from .errors import InvalidArgumentError, OperationFailure, ResourceError, SearcherError
from .searcher import AggregateSearcher
from .triples import ANY, Bean, Pattern, Triple, TripleStore

__version__ = "0.1.0"

__all__ = [
    "AggregateSearcher",
    "TripleStore",
    "Triple",
    "Pattern",
    "Bean",
    "ANY",
    "SearcherError",
    "InvalidArgumentError",
    "ResourceError",
    "OperationFailure",
]

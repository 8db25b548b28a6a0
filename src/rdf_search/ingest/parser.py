from __future__ import annotations

import logging
from typing import IO

from rdflib import BNode, Graph
from rdflib.store import Store
from rdflib.term import Node

from rdf_search.errors import OperationFailure
from rdf_search.settings import settings
from rdf_search.triples import TripleStore

logger = logging.getLogger(__name__)


def term_text(term: Node) -> str:
    """String form used by the store.

    URI references keep their full text, blank nodes become ``_:<id>`` and
    literals keep their lexical form only (no datatype or language tag).
    """
    if isinstance(term, BNode):
        return f"_:{term}"
    return str(term)


class TripleSink(Store):
    """rdflib store that forwards every parsed statement to a ``TripleStore``.

    Nothing is buffered: a statement repeated inside one document is added
    once per occurrence, and statements parsed before a syntax error stay in
    the target store.
    """

    def __init__(self, target: TripleStore):
        super().__init__()
        self.target = target
        self.added = 0

    def add(self, triple, context, quoted: bool = False) -> None:
        s, p, o = triple
        self.target.add(term_text(s), term_text(p), term_text(o))
        self.added += 1


class RdfParser:
    """Parses one RDF document and adds every statement to a store.

    Ingestion is eager and not transactional: if the document turns out to be
    malformed partway through, whatever was parsed before the error has
    already been added.
    """

    def __init__(self, store: TripleStore, *, format: str | None = None):
        self.store = store
        self.format = format or settings.default_format

    def parse(self, source: IO[bytes] | bytes, base_uri: str, *, format: str | None = None) -> int:
        fmt = format or self.format
        sink = TripleSink(self.store)
        graph = Graph(store=sink)
        try:
            if isinstance(source, (bytes, bytearray)):
                graph.parse(data=bytes(source), format=fmt, publicID=base_uri)
            else:
                graph.parse(source=source, format=fmt, publicID=base_uri)
        except Exception as e:
            logger.error(
                "Unable to parse %s as %s after %d triples: %s", base_uri, fmt, sink.added, e
            )
            raise OperationFailure(f"Unable to parse input from {base_uri}", e) from e

        logger.info("Added %d triples from %s", sink.added, base_uri)
        return sink.added

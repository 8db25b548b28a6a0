"""
Aggregate searcher - many RDF sources, one queryable view
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO

import httpx

from .errors import InvalidArgumentError, OperationFailure, ResourceError, require_text
from .ingest import RdfParser, SourceFetcher
from .triples import Bean, Pattern, QueryEngine, Triple, TripleStore, collapse
from .triples.identity import parse_uri

logger = logging.getLogger(__name__)


def _require_uri(value: str) -> None:
    try:
        parse_uri(value)
    except ResourceError as e:
        logger.error("%s", e)
        raise


class AggregateSearcher:
    """
    Searches through multiple RDF sources so that results look like they came
    from one place. Duplicates across sources are not merged.

    Each searcher owns its store, created here and torn down by ``close``.
    Nothing is shared between instances.
    """

    def __init__(self, *, fetcher: SourceFetcher | None = None, format: str | None = None):
        self.store = TripleStore()
        self.engine = QueryEngine(self.store)
        self.parser = RdfParser(self.store, format=format)
        self._fetcher = fetcher
        self._owns_fetcher = fetcher is None

    # --- Store ---

    def add(self, subject: str, predicate: str, object: str) -> Triple:
        require_text(subject, "Subject")
        require_text(predicate, "Predicate")
        require_text(object, "Object")
        return self.store.add(subject, predicate, object)

    def size(self) -> int:
        return self.store.size()

    def match(self, pattern: Pattern) -> list[Triple]:
        return self.engine.match(pattern)

    # --- Sources ---

    def add_source(self, stream: IO[bytes] | bytes, base_uri: str, *, format: str | None = None) -> int:
        """Eagerly add an RDF document.

        ``base_uri`` resolves relative identifiers inside the document.
        Returns the number of statements added.
        """
        if stream is None:
            raise InvalidArgumentError("InputStream cannot be null")
        require_text(base_uri, "Base URI")
        return self.parser.parse(stream, base_uri, format=format)

    def add_source_url(self, url: str, *, format: str | None = None) -> int:
        require_text(url, "URL")
        _require_uri(url)
        try:
            body = self._get_fetcher().fetch(url)
        except httpx.HTTPError as e:
            logger.error("Unable to fetch %s: %s", url, e)
            raise OperationFailure(f"Unable to fetch {url}", e) from e
        return self.add_source(io.BytesIO(body), url, format=format)

    def add_source_path(self, path: str | Path, *, format: str | None = None) -> int:
        if path is None or str(path) == "":
            raise InvalidArgumentError("Path cannot be null or empty.")
        p = Path(path).expanduser().resolve()
        try:
            with p.open("rb") as f:
                return self.add_source(f, p.as_uri(), format=format)
        except OSError as e:
            logger.error("Unable to read %s: %s", p, e)
            raise OperationFailure(f"Unable to read {p}", e) from e

    # --- Search ---

    def find_all(self) -> list[Bean]:
        """Blind search: every stored statement, grouped by subject."""
        return collapse(self.store.match(Pattern()))

    def search(self, query: str) -> list[dict[str, str]]:
        """Raw single-pattern SELECT. Rows are not collapsed into beans."""
        return self.engine.select(query)

    def find_by_predicate_object(self, predicate: str, object: str) -> list[Bean]:
        subjects = dict.fromkeys(self.engine.subjects_for(predicate, object))
        triples = [t for s in subjects for t in self.store.match(Pattern(subject=s))]
        return collapse(triples)

    def find_by_subject(self, subject: str) -> Bean | None:
        require_text(subject, "Subject")
        _require_uri(subject)

        beans = collapse(self.store.match(Pattern(subject=subject)))
        if not beans:
            return None
        # collapse groups by subject and only one subject was bound
        if len(beans) > 1:
            raise OperationFailure(f"Subject lookup for {subject} collapsed into {len(beans)} beans")
        return beans[0]

    # --- Lifecycle ---

    def _get_fetcher(self) -> SourceFetcher:
        if self._fetcher is None:
            self._fetcher = SourceFetcher()
        return self._fetcher

    def close(self) -> None:
        if self._fetcher is not None and self._owns_fetcher:
            self._fetcher.close()
            self._fetcher = None
        self.store.clear()

    def __enter__(self) -> AggregateSearcher:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

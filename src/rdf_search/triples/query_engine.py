from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from rdf_search.errors import InvalidArgumentError, OperationFailure, require_text

from .models import ANY, POSITIONS, Pattern, Triple
from .store import TripleStore

logger = logging.getLogger(__name__)

# One triple pattern only: a variable, an <iri> or a "plain literal" per position.
_TERM = r'\?\w+|<[^<>\s]*>|"[^"]*"'
_SELECT = re.compile(
    r"^\s*SELECT\s+(?P<vars>\*|(?:\?\w+\s*)+?)\s*"
    r"WHERE\s*\{\s*"
    rf"(?P<subject>{_TERM})\s+(?P<predicate>{_TERM})\s+(?P<object>{_TERM})"
    r"\s*\.?\s*\}\s*$",
    re.IGNORECASE | re.DOTALL,
)

SUBJECT_BY_PREDICATE_OBJECT = 'SELECT ?subject WHERE {{ ?subject <{predicate}> "{object}" . }}'


@dataclass(frozen=True, slots=True)
class SelectQuery:
    """A parsed single-pattern SELECT."""

    variables: tuple[str, ...]
    pattern: Pattern
    # position -> variable name, for every unbound position
    slots: tuple[tuple[str, str], ...]

    def bind(self, triple: Triple) -> dict[str, str] | None:
        row: dict[str, str] = {}
        for position, var in self.slots:
            value = triple.get(position)
            if row.setdefault(var, value) != value:
                return None
        return {v: row[v] for v in self.variables}


def parse_select(query: str) -> SelectQuery:
    m = _SELECT.match(query)
    if m is None:
        raise ValueError(f"Unsupported query; expected a single-pattern SELECT: {query!r}")

    terms: dict[str, str | object] = {}
    slots: list[tuple[str, str]] = []
    for position in POSITIONS:
        tok = m.group(position)
        if tok.startswith("?"):
            terms[position] = ANY
            slots.append((position, tok[1:]))
        else:
            terms[position] = tok[1:-1]

    pattern_vars = list(dict.fromkeys(var for _, var in slots))
    if m.group("vars").strip() == "*":
        variables = tuple(pattern_vars)
    else:
        variables = tuple(v[1:] for v in m.group("vars").split())
        unknown = [v for v in variables if v not in pattern_vars]
        if unknown:
            raise ValueError(f"Projected variables not in pattern: {', '.join(unknown)}")

    return SelectQuery(variables=variables, pattern=Pattern(**terms), slots=tuple(slots))


class QueryEngine:
    """Executes patterns and the restricted SELECT form against one store.

    ``subjects_for`` builds its SELECT by plain string interpolation. Values
    containing ``"`` or ``>`` therefore change the query text instead of being
    matched literally. Known limitation, kept for compatibility with existing
    callers; do not add escaping without deciding what quoted values should
    match.
    """

    def __init__(self, store: TripleStore):
        self.store = store

    def match(self, pattern: Pattern) -> list[Triple]:
        return self.store.match(pattern)

    def select(self, query: str) -> list[dict[str, str]]:
        """Run a raw single-pattern SELECT.

        Rows are denormalized: one dict (variable -> value) per matching triple,
        duplicates included.
        """
        if query is None or query == "":
            raise InvalidArgumentError("SPARQL query cannot be null or empty.")
        try:
            parsed = parse_select(query)
        except ValueError as e:
            logger.error("Query failed: %s", e)
            raise OperationFailure("Unable to execute query", e) from e

        rows = []
        for triple in self.store.match(parsed.pattern):
            row = parsed.bind(triple)
            if row is not None:
                rows.append(row)
        return rows

    def subjects_for(self, predicate: str, object: str) -> list[str]:
        """Subjects S such that (S, predicate, object) is stored.

        One entry per matching triple; a statement stored twice yields its
        subject twice.
        """
        require_text(predicate, "Predicate")
        require_text(object, "Object")

        query = SUBJECT_BY_PREDICATE_OBJECT.format(predicate=predicate, object=object)
        logger.debug("subject lookup: %s", query)
        return [row["subject"] for row in self.select(query)]

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator

from .models import POSITIONS, Pattern, Position, Triple


class TripleStore:
    """In-memory triple store with subject, predicate and object indexes.

    Statements are appended as-is: the same triple added twice (for example
    from two sources) is stored twice. Every stored triple is referenced from
    exactly one bucket of each index, so ``match`` can start from whichever
    bound position has the fewest candidates.

    Not thread-safe; callers serialize ``add`` against everything else.
    """

    def __init__(self) -> None:
        self._triples: list[Triple] = []
        self._index: dict[Position, defaultdict[str, list[Triple]]] = {
            p: defaultdict(list) for p in POSITIONS
        }

    def add(self, subject: str, predicate: str, object: str) -> Triple:
        triple = Triple(subject, predicate, object)
        self._triples.append(triple)
        for p in POSITIONS:
            self._index[p][triple.get(p)].append(triple)
        return triple

    def size(self) -> int:
        return len(self._triples)

    def __len__(self) -> int:
        return len(self._triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(self._triples)

    def is_empty(self) -> bool:
        return not self._triples

    def subjects(self) -> list[str]:
        return list(self._index["subject"])

    def predicates(self) -> list[str]:
        return list(self._index["predicate"])

    def candidates(self, position: Position, value: str) -> list[Triple]:
        # .get() so that probing a missing key does not grow the index
        return self._index[position].get(value, [])

    def match(self, pattern: Pattern) -> list[Triple]:
        bound = pattern.bound()
        if not bound:
            return list(self._triples)

        position, value = min(bound.items(), key=lambda kv: len(self.candidates(*kv)))
        rows = self.candidates(position, value)
        if len(bound) == 1:
            return list(rows)
        return [t for t in rows if pattern.matches(t)]

    def clear(self) -> None:
        self._triples.clear()
        for idx in self._index.values():
            idx.clear()

    def __repr__(self) -> str:
        return f"<TripleStore triples={len(self._triples)} subjects={len(self._index['subject'])}>"

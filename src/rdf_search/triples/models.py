from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Union

from pydantic import BaseModel, Field

Position = Literal["subject", "predicate", "object"]
POSITIONS: Final[tuple[Position, ...]] = ("subject", "predicate", "object")


class _Wildcard:
    """Matches any value in a pattern position."""

    _instance: _Wildcard | None = None

    def __new__(cls) -> _Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self):
        return (_Wildcard, ())


ANY: Final = _Wildcard()

Term = Union[str, _Wildcard]


@dataclass(frozen=True, slots=True)
class Triple:
    """An immutable statement.

    Identifiers (subject, predicate) and the object are kept in their string
    form; literals carry their lexical value only.
    """

    subject: str
    predicate: str
    object: str

    def get(self, position: Position) -> str:
        return getattr(self, position)


@dataclass(frozen=True, slots=True)
class Pattern:
    """A triple template; each position is a bound string or ``ANY``."""

    subject: Term = ANY
    predicate: Term = ANY
    object: Term = ANY

    def bound(self) -> dict[Position, str]:
        return {p: v for p in POSITIONS if (v := getattr(self, p)) is not ANY}

    def matches(self, triple: Triple) -> bool:
        return all(triple.get(p) == v for p, v in self.bound().items())


class Bean(BaseModel):
    """A per-subject result record.

    Holds the fields of the first statement seen for ``subject``; every further
    statement about the same subject is kept as a child bean. Children never
    have children of their own.
    """

    object: str
    predicate: str
    subject: str
    children: list[Bean] = Field(default_factory=list)

    @classmethod
    def from_triple(cls, triple: Triple) -> Bean:
        return cls(object=triple.object, predicate=triple.predicate, subject=triple.subject)

    def statement_count(self) -> int:
        return 1 + len(self.children)

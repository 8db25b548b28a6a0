from __future__ import annotations

from collections.abc import Iterable

from .models import Bean, Triple


def collapse(triples: Iterable[Triple]) -> list[Bean]:
    """Group a flat run of triples into one bean per distinct subject.

    The first triple seen for a subject becomes its representative bean; each
    later triple for that subject is appended to the representative's
    ``children`` and never overwrites its fields. For N input triples over D
    subjects the result has D beans holding N statements in total.

    Subject order follows first appearance, which callers should not rely on.
    """
    beans: dict[str, Bean] = {}
    for triple in triples:
        parent = beans.get(triple.subject)
        if parent is None:
            beans[triple.subject] = Bean.from_triple(triple)
        else:
            parent.children.append(Bean.from_triple(triple))
    return list(beans.values())

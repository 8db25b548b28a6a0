from rdf_search.triples import Bean, Triple, collapse


def _total(beans: list[Bean]) -> int:
    return sum(b.statement_count() for b in beans)


def test_collapse_empty() -> None:
    assert collapse([]) == []


def test_one_bean_per_subject() -> None:
    triples = [
        Triple("http://ex/a", "http://ex/p", "1"),
        Triple("http://ex/b", "http://ex/p", "2"),
        Triple("http://ex/a", "http://ex/q", "3"),
        Triple("http://ex/a", "http://ex/r", "4"),
    ]
    beans = collapse(triples)
    assert {b.subject for b in beans} == {"http://ex/a", "http://ex/b"}
    assert _total(beans) == len(triples)


def test_first_triple_is_representative() -> None:
    triples = [
        Triple("http://ex/a", "http://ex/p", "first"),
        Triple("http://ex/a", "http://ex/q", "second"),
        Triple("http://ex/a", "http://ex/r", "third"),
    ]
    (bean,) = collapse(triples)
    assert (bean.subject, bean.predicate, bean.object) == ("http://ex/a", "http://ex/p", "first")
    assert [c.object for c in bean.children] == ["second", "third"]
    assert all(c.subject == "http://ex/a" for c in bean.children)
    assert all(c.children == [] for c in bean.children)


def test_duplicate_triples_become_children() -> None:
    t = Triple("http://ex/a", "http://ex/p", "x")
    (bean,) = collapse([t, t])
    assert len(bean.children) == 1
    assert bean.children[0].object == "x"


def test_beans_are_detached_from_input() -> None:
    triples = [Triple("http://ex/a", "http://ex/p", "1")]
    beans = collapse(iter(triples))
    triples.append(Triple("http://ex/a", "http://ex/q", "2"))
    assert beans[0].children == []
    assert collapse(triples)[0] is not beans[0]


def test_bean_json_dump() -> None:
    (bean,) = collapse(
        [Triple("http://ex/a", "http://ex/p", "1"), Triple("http://ex/a", "http://ex/q", "2")]
    )
    data = bean.model_dump()
    assert data["subject"] == "http://ex/a"
    assert data["children"][0]["predicate"] == "http://ex/q"

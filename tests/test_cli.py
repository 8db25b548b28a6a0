import json

import pytest

from conftest import INTRO, LECTURE, SCREENCAST
from rdf_search.cli.main import app


def _run(argv, capsys):
    with pytest.raises(SystemExit) as ei:
        app(argv)
    return ei.value.code, capsys.readouterr().out


def test_version(capsys) -> None:
    from rdf_search import __version__

    rc, out = _run(["version"], capsys)
    assert rc == 0
    assert out.strip() == __version__


def test_all(library_path, capsys) -> None:
    rc, out = _run(["all", str(library_path)], capsys)
    assert rc == 0
    beans = json.loads(out)
    assert {b["subject"] for b in beans} == {INTRO, SCREENCAST, LECTURE}
    assert sum(1 + len(b["children"]) for b in beans) == 9


def test_find(library_path, capsys) -> None:
    rc, out = _run(["find", "http://localhost#type", "Screencast", str(library_path)], capsys)
    assert rc == 0
    assert [b["subject"] for b in json.loads(out)] == [SCREENCAST]


def test_subject_missing(library_path, capsys) -> None:
    rc, _ = _run(["subject", "http://ex/missing", str(library_path)], capsys)
    assert rc == 1


def test_query(library_path, capsys) -> None:
    q = f"SELECT ?o WHERE {{ <{INTRO}> <http://localhost#tag> ?o . }}"
    rc, out = _run(["query", q, str(library_path)], capsys)
    assert rc == 0
    assert len(json.loads(out)) == 5


def test_searcher_closed_when_source_fails(tmp_path, monkeypatch) -> None:
    from rdf_search import AggregateSearcher, OperationFailure

    closed = []
    monkeypatch.setattr(AggregateSearcher, "close", lambda self: closed.append(self))
    with pytest.raises(OperationFailure):
        app(["all", str(tmp_path / "missing.xml")])
    assert len(closed) == 1

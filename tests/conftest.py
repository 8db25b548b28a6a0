"""Shared fixtures: a fresh searcher and the 9-statement video library."""

from pathlib import Path

import pytest

from rdf_search import AggregateSearcher

FIXTURES = Path(__file__).resolve().parent / "fixtures"

KM = "http://localhost#"
INTRO = "http://www.youtube.com/watch?v=HeUrEh-nqtU"
SCREENCAST = "http://www.youtube.com/watch?v=QEAbCKPZkD4"
LECTURE = "http://www.youtube.com/watch?v=9bZkp7q19f0"


@pytest.fixture()
def library_bytes() -> bytes:
    return (FIXTURES / "km-video-lib-v3.xml").read_bytes()


@pytest.fixture()
def library_path() -> Path:
    return FIXTURES / "km-video-lib-v3.xml"


@pytest.fixture()
def searcher():
    s = AggregateSearcher()
    yield s
    s.close()


@pytest.fixture()
def loaded(searcher, library_path):
    with library_path.open("rb") as f:
        searcher.add_source(f, "http://localhost/test")
    return searcher

import pytest

from rdf_search.errors import InvalidArgumentError, ResourceError
from rdf_search.triples.identity import canonical_uri, is_absolute_uri, parse_uri


@pytest.mark.parametrize(
    "value",
    [
        "http://www.youtube.com/watch?v=QEAbCKPZkD4",
        "http://localhost#type",
        "https://example.org/a/b",
        "urn:isbn:0451450523",
        "file:///tmp/library.xml",
    ],
)
def test_absolute_uris_accepted(value: str) -> None:
    assert is_absolute_uri(value)
    parse_uri(value)


@pytest.mark.parametrize("value", ["relative/path", "#type", "not a uri", " http://ex/a"])
def test_malformed_uris_rejected(value: str) -> None:
    assert not is_absolute_uri(value)
    with pytest.raises(ResourceError):
        parse_uri(value)


def test_empty_is_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        parse_uri("")
    assert not is_absolute_uri(None)


def test_canonical_uri_lowercases_scheme_and_host() -> None:
    assert canonical_uri("HTTP://Example.ORG/Path") == "http://example.org/Path"


def test_rejected_uri_is_not_logged_as_error(caplog) -> None:
    with caplog.at_level("DEBUG", logger="rdf_search"):
        assert not is_absolute_uri("relative/path")
    assert not [r for r in caplog.records if r.levelname == "ERROR"]

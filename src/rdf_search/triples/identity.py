"""Absolute resource identifier checks.

Subjects and predicates handed to the searcher by callers are validated here
before they reach the store. The canonical form is what a URI library would
print back; lookups still use the caller's exact string because the store keeps
identifiers exactly as the parser produced them.
"""

from __future__ import annotations

import logging

from pydantic import AnyUrl, TypeAdapter, ValidationError

from rdf_search.errors import ResourceError, require_text

logger = logging.getLogger(__name__)

_URI = TypeAdapter(AnyUrl)


def parse_uri(value: str) -> AnyUrl:
    """Parse ``value`` as an absolute URI or raise ``ResourceError``."""
    require_text(value, "Identifier")
    if value != value.strip() or any(c.isspace() for c in value):
        raise ResourceError(f"Not a well-formed URI (whitespace): {value!r}")
    try:
        return _URI.validate_python(value)
    except ValidationError as e:
        logger.debug("Invalid resource identifier %r: %s", value, e)
        raise ResourceError(f"Not a well-formed absolute URI: {value!r}") from e


def is_absolute_uri(value: str | None) -> bool:
    if not value:
        return False
    try:
        parse_uri(value)
    except ResourceError:
        return False
    return True


def canonical_uri(value: str) -> str:
    return str(parse_uri(value))

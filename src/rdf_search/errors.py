from __future__ import annotations


class SearcherError(Exception):
    """Base class for every failure raised by the searcher."""


class InvalidArgumentError(SearcherError, ValueError):
    """A required string argument was None or empty."""


class ResourceError(SearcherError):
    """A string could not be treated as an absolute resource identifier."""


class OperationFailure(SearcherError):
    """Ingestion, retrieval or query execution failed.

    The underlying exception is chained as ``__cause__`` and also kept on
    ``cause`` for callers that only hold on to the wrapper.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


def require_text(value: str | None, name: str) -> str:
    if value is None or value == "":
        raise InvalidArgumentError(f"{name} cannot be null or empty.")
    return value

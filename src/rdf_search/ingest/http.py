from __future__ import annotations

import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

from rdf_search.errors import OperationFailure
from rdf_search.settings import settings

logger = logging.getLogger(__name__)

RDF_ACCEPT = "application/rdf+xml, text/turtle;q=0.9, application/n-triples;q=0.8, */*;q=0.1"


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.http_connect_timeout,
        read=settings.http_read_timeout,
        write=20.0,
        pool=10.0,
    )


def default_limits() -> httpx.Limits:
    return httpx.Limits(max_connections=20, max_keepalive_connections=5)


class HttpClientFactory:
    """Creates httpx clients with sane defaults.

    Keep one client per searcher; do not create per-request.
    """

    @staticmethod
    def client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
        return httpx.Client(
            headers={
                "User-Agent": settings.user_agent,
                "Accept": RDF_ACCEPT,
                "Accept-Encoding": "gzip, deflate",
            },
            timeout=default_timeout(),
            limits=default_limits(),
            follow_redirects=True,
            transport=transport,
        )


TransientHttpError = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


def transient_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(settings.http_retry_attempts),
        wait=wait_exponential_jitter(initial=0.5, max=10.0),
        retry=retry_if_exception_type(TransientHttpError),
    )


class SourceFetcher:
    """Downloads RDF documents.

    Bodies are returned already decoded: httpx undoes ``gzip`` and ``deflate``
    (zlib-wrapped or raw) content encodings while streaming, so the parser
    never sees compressed bytes.
    """

    def __init__(self, client: httpx.Client | None = None, *, max_bytes: int | None = None):
        self._client = client or HttpClientFactory.client()
        self.max_bytes = max_bytes or settings.http_max_bytes

    def close(self) -> None:
        self._client.close()

    @transient_retry()
    def fetch(self, url: str) -> bytes:
        with self._client.stream("GET", url) as r:
            r.raise_for_status()
            logger.debug(
                "GET %s -> %s (content-encoding=%s)",
                url,
                r.status_code,
                r.headers.get("content-encoding"),
            )
            body = bytearray()
            for chunk in r.iter_bytes():
                body.extend(chunk)
                if len(body) > self.max_bytes:
                    raise OperationFailure(f"Response from {url} exceeds {self.max_bytes} bytes")
        return bytes(body)

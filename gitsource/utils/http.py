"""
HTTP fetch helper.

A single blocking GET with optional bearer token. The timeout bounds
the connect, each wait for headers or body data, and the whole
request. No retries are attempted; callers needing resilience wrap
the call.
"""

import logging
import time
from typing import Optional

import requests
import urllib3

from gitsource.core.config import Config
from gitsource.core.exceptions import FetchError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def fetch_endpoint(
    endpoint: str,
    token: str = "",
    timeout: Optional[float] = None,
) -> bytes:
    """
    Fetch the body of an endpoint.

    Args:
        endpoint: URL to GET.
        token: Optional bearer token sent in the Authorization header.
        timeout: Seconds allowed for connecting, for each read and for
            the request as a whole; defaults to the configured HTTP
            timeout.

    Returns:
        Raw response body.

    Raises:
        FetchError: On a transport failure, an exceeded timeout or any
            status other than 200.
    """
    if timeout is None:
        timeout = Config.get().http.timeout

    headers = {}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    logger.debug(f"GET {endpoint} (timeout={timeout}s)")
    deadline = time.monotonic() + timeout

    try:
        response = requests.get(
            endpoint,
            headers=headers,
            timeout=(timeout, timeout),
            stream=True,
        )
    except requests.RequestException as e:
        raise FetchError(endpoint, reason=str(e)) from e

    with response:
        if response.status_code != requests.codes.ok:
            raise FetchError(endpoint, status_code=response.status_code)
        return _read_body(endpoint, response, deadline, timeout)


def _read_body(endpoint: str, response, deadline: float, timeout: float) -> bytes:
    """
    Read the body against an overall deadline.

    read1 performs at most one socket read, each bounded by the read
    timeout, so a slowly trickling body stops within about twice the
    timeout instead of blocking until the last byte.
    """
    chunks = []
    try:
        while True:
            if time.monotonic() > deadline:
                raise FetchError(endpoint, reason=f"exceeded total timeout of {timeout}s")
            chunk = response.raw.read1(CHUNK_SIZE, decode_content=True)
            if not chunk:
                break
            chunks.append(chunk)
    except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as e:
        raise FetchError(endpoint, reason=str(e)) from e
    return b"".join(chunks)

"""Outcome of a single GET against the API service.

Every fetch ends in exactly one of three states and callers are expected to
handle all of them:

* ``Success`` - a 2xx response, carrying its body text.
* ``HttpError`` - any other status, carrying status and body text.
* ``NetworkError`` - nothing usable came back (connection refused, DNS
  failure, timeout, broken stream), carrying the raised exception.
"""
from dataclasses import dataclass
from typing import Union

import httpx


@dataclass(frozen=True)
class Success:
    body: str


@dataclass(frozen=True)
class HttpError:
    status: int
    body: str


@dataclass(frozen=True)
class NetworkError:
    cause: Exception


FetchResult = Union[Success, HttpError, NetworkError]


async def fetch_text(http: httpx.AsyncClient, url: str) -> FetchResult:
    """GET url once and classify the outcome. Never raises an httpx error."""
    try:
        response = await http.get(url)
        body = response.text
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
        return NetworkError(exc)

    if response.is_success:
        return Success(body)
    return HttpError(response.status_code, body)

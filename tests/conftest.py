"""Shared fixtures: a stub transport standing in for ``requests.Session``."""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def make_response(
    status_code: int = 200,
    body: Any = b"",
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a fully buffered :class:`requests.Response`."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    resp.headers = CaseInsensitiveDict(headers or {})
    return resp


class StubSession:
    """Record prepared requests and answer with canned responses."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None) -> None:
        self.response = response if response is not None else make_response()
        self.error = error
        self.sent: List[requests.PreparedRequest] = []
        self.timeouts: List[Any] = []
        self.closed = False

    def send(self, prepared: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.sent.append(prepared)
        self.timeouts.append(kwargs.get("timeout"))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> requests.PreparedRequest:
        return self.sent[-1]


@pytest.fixture
def session() -> StubSession:
    return StubSession()

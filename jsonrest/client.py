"""JSON REST client built on :mod:`requests`."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from jsonrest.errors import ApiHTTPError, ApiTransportError, InvalidRequest
from jsonrest.models import ApiResponse, ClientConfig, RequestSpec
from jsonrest.utils import build_target, decode_body, encode_body, merge_query, resolve_headers

if TYPE_CHECKING:
    from jsonrest.configs import Config

logger = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class ApiClient:
    """Issue JSON requests against a base URL.

    Every call returns a :class:`~concurrent.futures.Future` right away. The
    future resolves to an :class:`ApiResponse` when the status code is below
    400. Otherwise it fails with :class:`ApiHTTPError`, or with
    :class:`ApiTransportError` when no response was received at all.
    """

    def __init__(
        self,
        url: str,
        keep_alive: bool = False,
        headers: Optional[Mapping[str, str]] = None,
        *,
        timeout: Optional[float] = None,
        max_workers: int = 4,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = ClientConfig.from_url(url, keep_alive=keep_alive, headers=headers, timeout=timeout)
        self.session = session or requests.Session()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="jsonrest")
        logger.debug(
            "ApiClient initialized with origin=%s base_path=%s keep_alive=%s",
            self.config.origin,
            self.config.base_path,
            keep_alive,
        )

    @classmethod
    def from_config(cls, config: "Config", **kwargs: Any) -> "ApiClient":
        """Instantiate a client from the loaded application configuration."""
        if not config.base_url:
            raise ValueError("JSONREST_BASE_URL or base_url in config.yml must be set")
        return cls(
            config.base_url,
            keep_alive=config.keep_alive,
            headers=config.default_headers,
            timeout=config.timeout,
            max_workers=config.max_workers,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------
    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Wait for pending requests, then close the underlying session."""
        self._executor.shutdown(wait=True)
        self.session.close()

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------
    def build_request(
        self,
        method: str,
        path: str = "",
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestSpec:
        """Resolve a call into a :class:`RequestSpec` without sending it."""
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method {method!r}")

        payload = encode_body(body)
        merged_query = merge_query(self.config.default_query, query)
        target = build_target(self.config.base_path, path, merged_query)
        return RequestSpec(
            method=method,
            path=path,
            url=f"{self.config.origin}{target}",
            query=merged_query,
            headers=resolve_headers(
                self.config.default_headers,
                headers,
                body=payload,
                keep_alive=self.config.keep_alive,
            ),
            body=payload,
        )

    # ------------------------------------------------------------------
    # Request execution
    # ------------------------------------------------------------------
    def request(
        self,
        method: str,
        path: str = "",
        query: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "Future[ApiResponse]":
        """Send a request in the background and return its future.

        Requests that cannot be prepared (bad header values, an unusable URL)
        raise :class:`InvalidRequest` here, before anything is queued.
        """
        spec = self.build_request(method, path, query, body, headers)
        prepared = self.prepare_request(spec)
        logger.debug("Queueing %s request to %s with headers %s", spec.method, spec.url, spec.headers)
        return self._executor.submit(self._send, spec, prepared)

    def prepare_request(self, spec: RequestSpec) -> requests.PreparedRequest:
        """Turn ``spec`` into the :class:`requests.PreparedRequest` put on the wire."""
        try:
            prepared = requests.Request(
                spec.method, spec.url, headers=spec.headers, data=spec.body
            ).prepare()
        except requests.RequestException as exc:
            raise InvalidRequest(f"Cannot prepare {spec.method} {spec.url}: {exc}") from exc
        # requests adds "Content-Length: 0" to bodiless non-GET requests
        prepared.headers = CaseInsensitiveDict(spec.headers)
        return prepared

    def _send(self, spec: RequestSpec, prepared: requests.PreparedRequest) -> ApiResponse:
        try:
            resp = self.session.send(prepared, timeout=self.config.timeout)
            raw = resp.content
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", spec.method, spec.url, exc)
            raise ApiTransportError(spec, str(exc)) from exc

        data, text = decode_body(raw, resp.encoding)
        result = ApiResponse(
            status_code=resp.status_code,
            headers={key.lower(): value for key, value in resp.headers.items()},
            data=data,
            text=text,
        )
        logger.info("%s %s -> %s", spec.method, spec.url, resp.status_code)
        if not result.ok:
            raise ApiHTTPError(result)
        return result

    # ------------------------------------------------------------------
    # Verb helpers
    # ------------------------------------------------------------------
    def get(
        self,
        path: str = "",
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "Future[ApiResponse]":
        return self.request("GET", path, query=query, headers=headers)

    def post(self, path: str = "", body: Any = None, headers: Optional[Mapping[str, str]] = None) -> "Future[ApiResponse]":
        return self.request("POST", path, body=body, headers=headers)

    def put(self, path: str = "", body: Any = None, headers: Optional[Mapping[str, str]] = None) -> "Future[ApiResponse]":
        return self.request("PUT", path, body=body, headers=headers)

    def patch(self, path: str = "", body: Any = None, headers: Optional[Mapping[str, str]] = None) -> "Future[ApiResponse]":
        return self.request("PATCH", path, body=body, headers=headers)

    def delete(self, path: str = "", body: Any = None, headers: Optional[Mapping[str, str]] = None) -> "Future[ApiResponse]":
        """Send a DELETE request; ``body`` is optional since most APIs ignore it."""
        return self.request("DELETE", path, body=body, headers=headers)


__all__ = ["ApiClient", "METHODS"]

"""URL helpers: base URL parsing, path joining and query merging."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from jsonrest.errors import InvalidBaseURL

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443}
_SLASHES = re.compile(r"/{2,}")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def parse_base_url(url: str) -> Tuple[str, str, int, str, Dict[str, str]]:
    """Split ``url`` into ``(scheme, host, port, path, query)``.

    URLs without a scheme are treated as https.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidBaseURL(f"Invalid base URL: {url!r}")
    url = url.strip()
    if not _SCHEME.match(url):
        url = f"https://{url}"
    try:
        parts = urlsplit(url)
        explicit_port = parts.port
    except ValueError as exc:
        raise InvalidBaseURL(f"Invalid base URL {url!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        raise InvalidBaseURL(f"Unsupported scheme {parts.scheme!r} in {url!r}")
    if not parts.hostname:
        raise InvalidBaseURL(f"Missing host in {url!r}")

    port = explicit_port if explicit_port is not None else DEFAULT_PORTS[scheme]
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    logger.debug("Parsed base URL %s -> %s://%s:%s%s", url, scheme, parts.hostname, port, parts.path)
    return scheme, parts.hostname, port, parts.path, query


def join_path(base_path: str, path: str) -> str:
    """Join ``base_path`` and ``path`` with a single separator.

    ``join_path("/v1/", "/items")`` gives ``"/v1/items"``. An empty ``path``
    targets the base path itself.
    """
    if not path:
        joined = base_path
    else:
        joined = f"{base_path}/{path}"
    joined = _SLASHES.sub("/", f"/{joined}")
    return joined


def merge_query(
    defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """Return ``defaults`` updated with ``overrides``; override values win."""
    merged = {str(k): _query_value(v) for k, v in defaults.items()}
    for key, value in (overrides or {}).items():
        merged[str(key)] = _query_value(value)
    return merged


def _query_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def build_target(base_path: str, path: str, query: Mapping[str, Any]) -> str:
    """Return the request target: joined path plus encoded query string."""
    target = join_path(base_path, path)
    if query:
        target = f"{target}?{urlencode(query, doseq=True)}"
    return target

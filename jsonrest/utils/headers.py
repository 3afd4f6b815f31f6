"""Header merging and defaulting."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

JSON_CONTENT_TYPE = "application/json"


def merge_headers(
    defaults: Mapping[str, str], overrides: Optional[Mapping[str, str]] = None
) -> CaseInsensitiveDict:
    """Return ``defaults`` updated with ``overrides``, ignoring key case."""
    merged: CaseInsensitiveDict = CaseInsensitiveDict(defaults)
    merged.update(overrides or {})
    return merged


def resolve_headers(
    defaults: Mapping[str, str],
    overrides: Optional[Mapping[str, str]] = None,
    *,
    body: Optional[bytes] = None,
    keep_alive: bool = False,
) -> Dict[str, str]:
    """Merge headers and fill in the JSON defaults.

    Content headers are only added when a ``body`` is sent and the caller did
    not set them already.
    """
    headers = merge_headers(defaults, overrides)
    headers.setdefault("Accept", JSON_CONTENT_TYPE)
    if keep_alive:
        headers["Connection"] = "keep-alive"
    if body is not None:
        headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
        headers.setdefault("Content-Length", str(len(body)))
    return {key: str(value) for key, value in headers.items()}

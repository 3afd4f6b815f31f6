"""Utility helpers for jsonrest."""

from .headers import JSON_CONTENT_TYPE, merge_headers, resolve_headers
from .json_utils import decode_body, encode_body, is_empty
from .url import build_target, join_path, merge_query, parse_base_url

__all__ = [
    "JSON_CONTENT_TYPE",
    "merge_headers",
    "resolve_headers",
    "decode_body",
    "encode_body",
    "is_empty",
    "build_target",
    "join_path",
    "merge_query",
    "parse_base_url",
]

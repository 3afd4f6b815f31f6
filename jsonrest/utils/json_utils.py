import json
import logging
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


def is_empty(value: Any) -> bool:
    """Return ``True`` for ``None`` and zero-length values."""
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


def encode_body(value: Any) -> Optional[bytes]:
    """Serialize ``value`` as compact JSON, or ``None`` when it is empty."""
    if is_empty(value):
        return None
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


def decode_body(raw: bytes, encoding: Optional[str] = None) -> Tuple[Any, str]:
    """Return ``(data, text)`` for a response body.

    ``data`` falls back to an empty dict when the body is empty or is not
    valid JSON; ``text`` always holds the raw body.
    """
    try:
        text = raw.decode(encoding or "utf-8")
    except (LookupError, UnicodeDecodeError):
        text = raw.decode("latin1")

    if not text.strip():
        return {}, text
    try:
        return json.loads(text), text
    except ValueError:
        logger.debug("Response body is not valid JSON", exc_info=True)
        return {}, text

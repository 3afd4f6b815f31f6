from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from jsonrest.utils.url import DEFAULT_PORTS, parse_base_url


@dataclass(frozen=True)
class ClientConfig:
    """Connection parameters of a client, fixed at construction."""

    scheme: str
    host: str
    port: int
    base_path: str = ""
    default_query: Mapping[str, str] = field(default_factory=dict)
    default_headers: Mapping[str, str] = field(default_factory=dict)
    keep_alive: bool = False
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        # mappings are exposed read-only
        object.__setattr__(self, "default_query", MappingProxyType(dict(self.default_query)))
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))

    def __hash__(self) -> int:
        return hash(
            (
                self.scheme,
                self.host,
                self.port,
                self.base_path,
                frozenset(self.default_query.items()),
                frozenset(self.default_headers.items()),
                self.keep_alive,
                self.timeout,
            )
        )

    @classmethod
    def from_url(
        cls,
        url: str,
        keep_alive: bool = False,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> "ClientConfig":
        """Parse ``url`` and return the matching configuration."""
        scheme, host, port, base_path, query = parse_base_url(url)
        return cls(
            scheme=scheme,
            host=host,
            port=port,
            base_path=base_path,
            default_query=query,
            default_headers=dict(headers or {}),
            keep_alive=keep_alive,
            timeout=timeout,
        )

    @property
    def origin(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if DEFAULT_PORTS.get(self.scheme) == self.port:
            return f"{self.scheme}://{host}"
        return f"{self.scheme}://{host}:{self.port}"


@dataclass
class RequestSpec:
    """A fully resolved request, ready to be handed to the transport."""

    method: str
    path: str
    url: str
    query: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


class ApiResponse(BaseModel):
    """Normalized result of a request."""

    status_code: int
    headers: Dict[str, str] = {}
    data: Any = {}
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code < 400

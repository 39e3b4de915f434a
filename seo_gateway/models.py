# seo_gateway/models.py
"""
Data models for the seo_gateway handlers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class Requester(str, Enum):
    """Who is asking for the page."""

    CRAWLER = "crawler"
    BROWSER = "browser"


@dataclass(slots=True)
class GatewayRequest:
    """Incoming request as seen by the gateway: method, headers and path."""

    method: str
    headers: Mapping[str, str]
    path: str = "/"

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> GatewayRequest:
        """Build a request from a serverless event (``httpMethod``/``headers``/``path``)."""
        return cls(
            method=event.get("httpMethod") or "GET",
            headers=event.get("headers") or {},
            path=event.get("path") or "/",
        )


@dataclass(slots=True, frozen=True)
class ResolvedDocument:
    """Document body chosen for a crawler and the file it came from (None for the fallback)."""

    content: bytes
    source: Optional[Path] = None

    @property
    def is_fallback(self) -> bool:
        return self.source is None


@dataclass(slots=True, frozen=True)
class GatewayResponse:
    """Status, headers and body of one response; immutable once built."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    # headers are a read-only mapping proxy, which cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def to_event(self) -> Dict[str, Any]:
        """Serverless response dict: ``statusCode``, ``headers``, text ``body``."""
        return {
            "statusCode": self.status,
            "headers": dict(self.headers),
            "body": self.body.decode("utf-8", errors="replace"),
        }

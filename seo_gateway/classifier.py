# seo_gateway/classifier.py
"""
Определение краулеров по заголовку User-Agent.
"""
from __future__ import annotations

from typing import Any, Collection, FrozenSet, Iterable, Mapping, Optional

from seo_gateway.models import Requester

__all__ = ("CRAWLER_USER_AGENTS", "build_identifiers", "user_agent_from", "is_crawler", "classify")

# Search engines, social preview fetchers, command-line clients and SEO bots.
CRAWLER_USER_AGENTS: FrozenSet[str] = frozenset(
    {
        "googlebot",
        "bingbot",
        "yandexbot",
        "yandex",
        "baiduspider",
        "slurp",
        "duckduckbot",
        "facebookexternalhit",
        "whatsapp",
        "twitterbot",
        "linkedinbot",
        "applebot",
        "curl",
        "wget",
        "semrushbot",
        "ahrefsbot",
        "mj12bot",
    }
)


def build_identifiers(extra: Iterable[str] = ()) -> FrozenSet[str]:
    """Return the built-in identifiers merged with *extra*, lowercased."""
    return CRAWLER_USER_AGENTS | {e.lower() for e in extra if e}


def user_agent_from(headers: Mapping[str, Any]) -> Any:
    """Read User-Agent under both capitalisations used by edge platforms."""
    return headers.get("user-agent") or headers.get("User-Agent") or ""


def is_crawler(user_agent: Optional[str], identifiers: Collection[str] = CRAWLER_USER_AGENTS) -> bool:
    """Case-insensitive substring membership test; anything that is not a string is not a bot."""
    if not user_agent or not isinstance(user_agent, str):
        return False
    ua = user_agent.lower()
    return any(bot in ua for bot in identifiers)


def classify(user_agent: Optional[str], identifiers: Collection[str] = CRAWLER_USER_AGENTS) -> Requester:
    return Requester.CRAWLER if is_crawler(user_agent, identifiers) else Requester.BROWSER

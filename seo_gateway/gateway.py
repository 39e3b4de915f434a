# File: seo_gateway/gateway.py
"""seo_gateway.gateway: отдаёт краулерам пререндеренный HTML, браузеры перенаправляет в SPA."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, FrozenSet, Mapping, Optional

from seo_gateway.classifier import build_identifiers, classify, user_agent_from
from seo_gateway.config import GatewayConfig
from seo_gateway.fallback import render_fallback_document
from seo_gateway.logger import logger
from seo_gateway.models import GatewayRequest, GatewayResponse, Requester, ResolvedDocument
from seo_gateway.resolver import DocumentResolver

__all__ = ["Gateway", "degraded_response"]


def degraded_response() -> GatewayResponse:
    """Empty 200 so the hosting edge falls back to its own index.html."""
    return GatewayResponse(status=200, headers={"Content-Type": "text/html"}, body=b"")


class Gateway:
    """Классифицирует запрос и строит ответ. Не хранит изменяемого состояния между запросами."""

    def __init__(
        self,
        config: GatewayConfig,
        resolver: Optional[DocumentResolver] = None,
        identifiers: Optional[FrozenSet[str]] = None,
    ) -> None:
        self.config = config
        self.identifiers = identifiers or build_identifiers(config.extra_bot_identifiers)
        self.resolver = resolver or DocumentResolver(
            config.candidate_paths,
            render_fallback_document(config.site, config.redirect_location),
            config.resolve_timeout,
        )

    async def handle(self, request: GatewayRequest) -> GatewayResponse:
        """Classify → resolve (crawlers only) → respond. Any failure degrades to an empty 200."""
        requester: Optional[Requester] = None
        try:
            requester = classify(user_agent_from(request.headers), self.identifiers)
            if requester is Requester.CRAWLER:
                document = await self.resolver.resolve()
                return self.crawler_response(document)
            return self.redirect_response()
        except Exception:
            logger.exception(
                "Error in homepage gateway (requester=%s), returning empty response",
                requester.value if requester else "unknown",
            )
            return degraded_response()

    def crawler_response(self, document: ResolvedDocument) -> GatewayResponse:
        return GatewayResponse(
            status=200,
            headers={
                "Content-Type": "text/html; charset=utf-8",
                "Cache-Control": f"public, max-age={self.config.crawler_max_age}",
            },
            body=document.content,
        )

    def redirect_response(self) -> GatewayResponse:
        return GatewayResponse(
            status=302,
            headers={
                "Location": self.config.redirect_location,
                "Cache-Control": f"public, max-age={self.config.browser_max_age}",
            },
            body=b"",
        )

    async def handle_event(self, event: Mapping[str, Any]) -> GatewayResponse:
        """Serverless variant: the event itself may be malformed."""
        try:
            request = GatewayRequest.from_event(event)
        except Exception:
            logger.exception("Malformed homepage event, returning empty response")
            return degraded_response()
        return await self.handle(request)

    def __call__(self, event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
        """Synchronous ``handler(event, context)`` entry point."""
        return asyncio.run(self.handle_event(event)).to_event()

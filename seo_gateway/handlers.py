# === FILE: seo_gateway/handlers.py ===
"""
Serverless entry points (Netlify/Lambda-style ``handler(event, context)``).

Configuration is read once per process from ``SEO_GATEWAY_CONFIG`` (or
``configs/default.yaml``, or built-in defaults). If it cannot be loaded the
homepage handler still answers with the degraded empty 200 and the contact
handler with its 500 JSON error.
"""
from __future__ import annotations

import asyncio
import os
from functools import lru_cache
from typing import Any, Dict, Mapping

from seo_gateway.config import GatewayConfig, load_config
from seo_gateway.contact import ContactHandler, json_response
from seo_gateway.gateway import Gateway, degraded_response
from seo_gateway.logger import logger

__all__ = ["homepage_handler", "contact_handler"]

CONFIG_ENV = "SEO_GATEWAY_CONFIG"


@lru_cache(maxsize=1)
def _config() -> GatewayConfig:
    return load_config(os.environ.get(CONFIG_ENV))


@lru_cache(maxsize=1)
def _gateway() -> Gateway:
    return Gateway(_config())


@lru_cache(maxsize=1)
def _contact() -> ContactHandler:
    return ContactHandler(_config().contact)


def homepage_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    try:
        gateway = _gateway()
    except Exception:
        logger.exception("Could not initialise homepage gateway, returning empty response")
        return degraded_response().to_event()
    return gateway(event, context)


def contact_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    try:
        handler = _contact()
        method, body = event.get("httpMethod") or "", event.get("body")
    except Exception:
        logger.exception("Could not handle contact event")
        return json_response(500, {"error": "Failed to send email"}).to_event()
    return asyncio.run(handler.handle(method, body)).to_event()

# File: seo_gateway/server.py
"""seo_gateway.server: aiohttp-приложение с домашней страницей и контактной формой."""

from __future__ import annotations

from aiohttp import web

from seo_gateway.config import GatewayConfig
from seo_gateway.contact import ContactHandler
from seo_gateway.gateway import Gateway
from seo_gateway.logger import logger
from seo_gateway.models import GatewayRequest, GatewayResponse

__all__ = ["GATEWAY_KEY", "CONTACT_KEY", "create_app", "run_server", "to_web_response"]

GATEWAY_KEY = web.AppKey("gateway", Gateway)
CONTACT_KEY = web.AppKey("contact", ContactHandler)


def to_web_response(result: GatewayResponse) -> web.Response:
    return web.Response(status=result.status, headers=dict(result.headers), body=result.body)


async def homepage(request: web.Request) -> web.Response:
    gateway = request.app[GATEWAY_KEY]
    result = await gateway.handle(
        GatewayRequest(method=request.method, headers=request.headers, path=request.path)
    )
    return to_web_response(result)


async def contact(request: web.Request) -> web.Response:
    body = await request.text() if request.can_read_body else None
    result = await request.app[CONTACT_KEY].handle(request.method, body)
    return to_web_response(result)


def create_app(
    config: GatewayConfig,
    gateway: Gateway | None = None,
    contact_handler: ContactHandler | None = None,
) -> web.Application:
    """Собирает приложение; объекты обработчиков создаются один раз на процесс."""
    app = web.Application()
    app[GATEWAY_KEY] = gateway or Gateway(config)
    app[CONTACT_KEY] = contact_handler or ContactHandler(config.contact)
    app.router.add_get("/", homepage)
    app.router.add_route("*", "/contact", contact)
    return app


def run_server(config: GatewayConfig, host: str | None = None, port: int | None = None) -> None:
    host = host or config.server.host
    port = port or config.server.port
    logger.info("Starting seo_gateway on %s:%s", host, port)
    web.run_app(create_app(config), host=host, port=port, print=None)

# seo_gateway/__init__.py
"""
seo_gateway package initializer.
Defines package version and exposes the gateway, serverless handlers and CLI.
"""
__version__ = "0.1.0"

from seo_gateway.gateway import Gateway
from seo_gateway.handlers import contact_handler, homepage_handler
from .cli import cli  # экспорт для pytest

__all__ = ["__version__", "Gateway", "cli", "contact_handler", "homepage_handler"]

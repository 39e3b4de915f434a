# File: tests/conftest.py
from pathlib import Path
from typing import List

import pytest

from seo_gateway.config import GatewayConfig
from seo_gateway.gateway import Gateway
from seo_gateway.logger import init_logging, logger


@pytest.fixture()
def candidate_paths(tmp_path) -> List[Path]:
    """
    Three candidate locations inside tmp_path; none of them exist yet.
    """
    return [
        tmp_path / "buildhome" / "index-seo.html",
        tmp_path / "functions" / "dist" / "index-seo.html",
        tmp_path / "dist" / "index-seo.html",
    ]


@pytest.fixture()
def gateway_config(candidate_paths) -> GatewayConfig:
    """
    Return a GatewayConfig that only looks at tmp_path candidates.
    """
    return GatewayConfig(candidate_paths=candidate_paths, resolve_timeout=1.0)


@pytest.fixture()
def gateway(gateway_config) -> Gateway:
    return Gateway(gateway_config)


@pytest.fixture()
def write_candidate():
    """
    Write *content* to a candidate path, creating parent folders.
    """
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def propagate_logs(monkeypatch):
    """Let caplog see records from the project logger (it does not propagate by default)."""
    monkeypatch.setattr(logger, "propagate", True)


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps stdout; rebuild handlers so later tests log to a live stream."""
    yield
    init_logging()

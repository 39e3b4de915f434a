# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from seo_gateway.config import DEFAULT_CANDIDATE_PATHS, GatewayConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("redirect_location: /app.html", ".yaml", None),
        (json.dumps({"redirect_location": "/app.html"}), ".json", None),
        ("{bad json", ".json", ValueError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("unknown_field: 1", ".yaml", ValidationError),
        ("crawler_max_age: -1", ".yaml", ValidationError),
        ("resolve_timeout: 0", ".yaml", ValidationError),
        ("redirect_location: /app.html", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, GatewayConfig)
        assert cfg.redirect_location == "/app.html"
        assert cfg.crawler_max_age == 3600


def test_defaults_match_contract():
    cfg = GatewayConfig()
    assert cfg.candidate_paths == DEFAULT_CANDIDATE_PATHS
    assert cfg.candidate_paths[0] == Path("/opt/buildhome/repo/web/dist/index-seo.html")
    assert cfg.redirect_location == "/index.html"
    assert (cfg.crawler_max_age, cfg.browser_max_age) == (3600, 300)
    assert cfg.site.canonical_url == "https://prettyscoreboard.com/"


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_no_default_file_uses_builtin_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == GatewayConfig()


def test_default_file_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("browser_max_age: 60", encoding="utf-8")
    assert load_config(None).browser_max_age == 60


def test_shipped_default_yaml_matches_builtin_defaults():
    shipped = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"
    assert load_config(shipped) == GatewayConfig()


def test_extra_identifiers_are_normalised(tmp_path):
    cfg_path = write_file(
        tmp_path, "extra_bot_identifiers: [' PetalBot ', petalbot, '', Bytespider]", ".yaml"
    )
    assert load_config(cfg_path).extra_bot_identifiers == ("petalbot", "bytespider")


def test_config_is_frozen():
    cfg = GatewayConfig()
    with pytest.raises(ValidationError):
        cfg.redirect_location = "/other"  # type: ignore[misc]

# File: tests/test_handlers.py
import json

import pytest

import seo_gateway.handlers as handlers

CHROME_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0"


@pytest.fixture(autouse=True)
def clear_handler_cache():
    for cached in (handlers._config, handlers._gateway, handlers._contact):
        cached.cache_clear()
    yield
    for cached in (handlers._config, handlers._gateway, handlers._contact):
        cached.cache_clear()


@pytest.fixture()
def env_config(tmp_path, monkeypatch, write_candidate):
    prerendered = write_candidate(tmp_path / "dist" / "index-seo.html", "<html>seo</html>")
    cfg = tmp_path / "gateway.yaml"
    cfg.write_text(
        f"candidate_paths: ['{prerendered.as_posix()}']\n"
        "contact:\n  api_key_env: TEST_MAIL_KEY\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(handlers.CONFIG_ENV, str(cfg))
    return cfg


def test_homepage_handler_crawler(env_config):
    result = handlers.homepage_handler(
        {"httpMethod": "GET", "headers": {"user-agent": "Twitterbot/1.0"}}
    )
    assert result["statusCode"] == 200
    assert result["body"] == "<html>seo</html>"


def test_homepage_handler_browser(env_config):
    result = handlers.homepage_handler({"httpMethod": "GET", "headers": {"User-Agent": CHROME_UA}})
    assert result == {
        "statusCode": 302,
        "headers": {"Location": "/index.html", "Cache-Control": "public, max-age=300"},
        "body": "",
    }


def test_homepage_handler_builds_gateway_once(env_config):
    handlers.homepage_handler({"headers": {}})
    handlers.homepage_handler({"headers": {}})
    assert handlers._gateway.cache_info().misses == 1


def test_homepage_handler_degrades_on_bad_config(tmp_path, monkeypatch):
    monkeypatch.setenv(handlers.CONFIG_ENV, str(tmp_path / "missing.yaml"))
    result = handlers.homepage_handler({"headers": {"user-agent": "Googlebot"}})
    assert result == {"statusCode": 200, "headers": {"Content-Type": "text/html"}, "body": ""}


def test_contact_handler_without_key(env_config, monkeypatch):
    monkeypatch.delenv("TEST_MAIL_KEY", raising=False)
    result = handlers.contact_handler(
        {
            "httpMethod": "POST",
            "body": json.dumps(
                {"name": "A", "email": "a@example.com", "subject": "other", "message": "hi"}
            ),
        }
    )
    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "Server configuration error"}


def test_contact_handler_preflight(env_config):
    result = handlers.contact_handler({"httpMethod": "OPTIONS"})
    assert result["statusCode"] == 200
    assert result["headers"]["Access-Control-Allow-Origin"] == "*"


def test_contact_handler_bad_config_returns_500(tmp_path, monkeypatch):
    monkeypatch.setenv(handlers.CONFIG_ENV, str(tmp_path / "missing.yaml"))
    result = handlers.contact_handler({"httpMethod": "POST", "body": "{}"})
    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "Failed to send email"}


def test_contact_handler_without_event(env_config):
    result = handlers.contact_handler(None)
    assert result["statusCode"] == 500
    assert json.loads(result["body"]) == {"error": "Failed to send email"}

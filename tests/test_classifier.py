# File: tests/test_classifier.py
import pytest

from seo_gateway.classifier import (
    CRAWLER_USER_AGENTS,
    build_identifiers,
    classify,
    is_crawler,
    user_agent_from,
)
from seo_gateway.models import Requester

CHROME_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
IPHONE_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
)


@pytest.mark.parametrize("bot", sorted(CRAWLER_USER_AGENTS))
@pytest.mark.parametrize("casing", [str.lower, str.upper, str.title])
def test_every_identifier_matches_in_any_casing(bot, casing):
    ua = f"Mozilla/5.0 (compatible; {casing(bot)}/2.1; +http://example.com/bot)"
    assert classify(ua) is Requester.CRAWLER


@pytest.mark.parametrize(
    "ua",
    [
        "Googlebot/2.1 (+http://www.google.com/bot.html)",
        "facebookexternalhit/1.1 (+http://www.facebook.com/externalhit_uatext.php)",
        "WhatsApp/2.23.20.0",
        "curl/8.4.0",
        "Wget/1.21.4",
        "Mozilla/5.0 (compatible; AhrefsBot/7.0; +http://ahrefs.com/robot/)",
    ],
)
def test_real_crawler_signatures(ua):
    assert is_crawler(ua)


@pytest.mark.parametrize("ua", [None, "", CHROME_UA, IPHONE_UA])
def test_browsers_and_missing_header(ua):
    assert classify(ua) is Requester.BROWSER


@pytest.mark.parametrize("ua", [b"Googlebot", 42, ["Googlebot"]])
def test_non_string_header_is_browser(ua):
    assert classify(ua) is Requester.BROWSER


def test_identifier_set_is_lowercase_and_deduplicated():
    assert all(ident == ident.lower() for ident in CRAWLER_USER_AGENTS)
    assert "googlebot" in CRAWLER_USER_AGENTS
    assert "Googlebot" not in CRAWLER_USER_AGENTS


def test_extra_identifiers():
    identifiers = build_identifiers(["PetalBot", ""])
    assert "petalbot" in identifiers
    assert classify("Mozilla/5.0 (compatible; PetalBot)", identifiers) is Requester.CRAWLER
    assert classify("Mozilla/5.0 (compatible; PetalBot)") is Requester.BROWSER


@pytest.mark.parametrize(
    "headers,expected",
    [
        ({"user-agent": "Googlebot"}, "Googlebot"),
        ({"User-Agent": "bingbot"}, "bingbot"),
        ({"user-agent": "", "User-Agent": "curl/8"}, "curl/8"),
        ({}, ""),
    ],
)
def test_user_agent_from_both_capitalisations(headers, expected):
    assert user_agent_from(headers) == expected

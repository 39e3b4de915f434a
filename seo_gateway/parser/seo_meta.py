"""SEO metadata extraction for seo_gateway.

Pulls out what a search engine or link-preview fetcher reads from a document
served to crawlers:

* title — document <title> text or ``""`` if absent.
* description — ``<meta name="description">`` content.
* robots — ``<meta name="robots">`` content.
* canonical — ``<link rel="canonical">`` href.
* og — Open Graph ``og:*`` properties.

Used by ``seo-gateway check`` to show the metadata of the response body.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Union

from bs4 import BeautifulSoup

__all__: Sequence[str] = ("SeoMeta", "parse_seo_meta")


@dataclass(slots=True)
class SeoMeta:
    """Metadata visible to a client that does not execute JavaScript."""

    title: str = ""
    description: str = ""
    robots: str = ""
    canonical: str = ""
    og: dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def indexable(self) -> bool:
        return "noindex" not in self.robots.lower()


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    tag = soup.find("meta", attrs={"name": name})
    if tag is None:
        return ""
    return str(tag.get("content", "")).strip()  # type: ignore[union-attr]


def parse_seo_meta(html: Union[str, bytes]) -> SeoMeta:
    """Parse *html* (text or UTF-8 bytes) into :class:`SeoMeta`."""
    soup = BeautifulSoup(html, "lxml")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    canonical = ""
    for link in soup.find_all("link", href=True):
        rel = link.get("rel") or []
        # bs4 splits rel into a list of tokens
        if "canonical" in [r.lower() for r in rel]:
            canonical = str(link["href"]).strip()
            break

    og: dict[str, str] = {}
    for tag in soup.find_all("meta", attrs={"property": True}):
        prop = str(tag["property"])
        if prop.startswith("og:"):
            og[prop] = str(tag.get("content", "")).strip()

    return SeoMeta(
        title=title,
        description=_meta_content(soup, "description"),
        robots=_meta_content(soup, "robots"),
        canonical=canonical,
        og=og,
    )

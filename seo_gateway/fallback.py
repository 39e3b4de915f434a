# File: seo_gateway/fallback.py
"""seo_gateway.fallback: встроенный минимальный HTML для краулеров, если пререндер не найден.

Шаблон хранится в коде, а не на диске: документ должен собираться даже тогда,
когда недоступна ни одна файловая система.
"""

from __future__ import annotations

from jinja2 import Environment, select_autoescape

from seo_gateway.config import SiteMeta

__all__ = ["FALLBACK_TEMPLATE", "render_fallback_document"]

FALLBACK_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{{ site.title }}</title>
  <meta name="description" content="{{ site.description }}" />
  <meta name="robots" content="index, follow" />
  <link rel="canonical" href="{{ site.canonical_url }}" />
  <script>window.location.href = {{ location | tojson }};</script>
</head>
<body>
  <p>Loading...</p>
  <p><a href="{{ location }}">Click here if you are not redirected</a></p>
</body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default_for_string=True, default=True))


def render_fallback_document(site: SiteMeta, location: str) -> bytes:
    """Рендерит резервный документ один раз при старте и возвращает байты UTF-8."""
    template = _env.from_string(FALLBACK_TEMPLATE)
    return template.render(site=site, location=location).encode("utf-8")

"""seo_gateway.parser: разбор HTML-документов, которые получают краулеры."""

from .seo_meta import SeoMeta, parse_seo_meta

__all__ = ["SeoMeta", "parse_seo_meta"]

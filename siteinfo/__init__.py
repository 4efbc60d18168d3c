"""サイト情報ページ（トラフィック統計）のパーサー."""

from siteinfo.exceptions import (
    DocumentParseError,
    FieldNotFoundError,
    MalformedNumberError,
    NoEnoughDataError,
    SiteInfoError,
    TableAbsentError,
    TransportError,
)
from siteinfo.models import Keyword, Link, ParseResult, Site, Subdomain, Upstream, Visitor
from siteinfo.scraper import fetch_site_info, parse, site_info

__all__ = [
    "DocumentParseError",
    "FieldNotFoundError",
    "Keyword",
    "Link",
    "MalformedNumberError",
    "NoEnoughDataError",
    "ParseResult",
    "Site",
    "SiteInfoError",
    "Subdomain",
    "TableAbsentError",
    "TransportError",
    "Upstream",
    "Visitor",
    "fetch_site_info",
    "parse",
    "site_info",
]

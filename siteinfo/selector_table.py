"""サイト情報ページの CSS セレクタ定義.

ページのマークアップが変わった場合はここだけを直す。
"""

from types import MappingProxyType

# フィールド名 -> セレクタ（表形式のフィールドは tbody を指す）
SELECTORS = MappingProxyType({
    "global_rank": "span.globleRank span div strong",
    "local_rank": "span.countryRank span div strong",
    "country": "span.countryRank span h4 a",
    "linking_total": "section#linksin-panel-content div span div span.font-4.box1-r",
    "title": "div.row-fluid.siteinfo-site-summary span div p",
    "description": "section#contact-panel-content div.row-fluid span.span8 p.color-s3",
    "visitors": "table#demographics_div_country_table tbody",
    "keywords": "table#keywords_top_keywords_table tbody",
    "upstreams": "table#keywords_upstream_site_table tbody",
    "links_from": "table#linksin_table tbody",
    "related": "table#audience_overlap_table tbody",
    "categories": "table#category_link_table tbody",
    "subdomains": "table#subdomain_table tbody",
    "no_data": "section#no-enough-data",
})

# 行コンテナ内のセレクタ
ROW_SELECTORS = MappingProxyType({
    "row": "tr",
    "visitor_country": "td a",
    "visitor_cells": "td span",  # 先頭 = 割合, 末尾 = 国内順位
    "keyword_word": "td:first-child span:last-child",
    "keyword_percent": "td:last-child span",
    "upstream_site": "td a",
    "upstream_percent": "td:last-child span",
    "link_site": "span.word-wrap a",
    "link_page": "a.word-wrap",
    "related_site": "a",
    "category": "a",
    "subdomain_domain": "td:first-child span",
    "subdomain_percent": "td:last-child span",
})

# エラーメッセージ用のフィールド表示名
FIELD_NAMES = MappingProxyType({
    "global_rank": "global rank",
    "local_rank": "local rank",
    "country": "country",
    "linking_total": "linking total",
    "title": "site title",
    "description": "site description",
    "visitors": "visitors",
    "keywords": "keywords",
    "upstreams": "upstream sites",
    "links_from": "linking sites",
    "related": "related sites",
    "categories": "categories",
    "subdomains": "subdomains",
})

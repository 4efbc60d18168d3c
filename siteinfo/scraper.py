"""サイト情報ページのスクレイピングモジュール.

処理フロー:
  1. HTML をパースしてドキュメントツリーを作る
  2. 「データ不足」マーカーがあれば NoEnoughDataError で終了
  3. スカラー値（順位・国・被リンク数・タイトル・説明）を取得
  4. 表形式の値（訪問者・キーワード・流入元・被リンク・関連サイト・
     カテゴリ・サブドメイン）を取得

どこかのフィールドで失敗した時点で打ち切り、それまでに取得できた
フィールドとエラーを ParseResult にまとめて返す。
"""

from __future__ import annotations

import logging
import re
from functools import partial
from typing import IO, Callable
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from siteinfo.config import REQUEST_HEADERS, REQUEST_TIMEOUT, SITEINFO_URL_TEMPLATE
from siteinfo.exceptions import (
    DocumentParseError,
    FieldNotFoundError,
    MalformedNumberError,
    NoEnoughDataError,
    SiteInfoError,
    TableAbsentError,
    TransportError,
)
from siteinfo.models import (
    Keyword,
    Link,
    ParseResult,
    Site,
    Subdomain,
    Upstream,
    Visitor,
)
from siteinfo.selector_table import ROW_SELECTORS, SELECTORS

logger = logging.getLogger(__name__)

GetFunc = Callable[[str], requests.Response]

_DIGITS_PATTERN = re.compile(r"[0-9]+")
_UINT64_MAX = 2**64 - 1


# --- スカラー値 ---


def parse_uint(text: str, field: str) -> int:
    """桁区切りのカンマを除去して非負整数にする (例: 1,111,111)."""
    digits = text.replace(",", "")
    if not _DIGITS_PATTERN.fullmatch(digits) or int(digits) > _UINT64_MAX:
        raise MalformedNumberError(field, text)
    return int(digits)


def extract_text(node: Tag, selector: str, field: str) -> str:
    """selector に最初に一致したノードのテキストを返す.

    node は BeautifulSoup ドキュメントでも行などの部分ノードでもよい。

    Raises:
        FieldNotFoundError: 一致するノードがない、またはテキストが空
    """
    found = node.select_one(selector)
    text = found.get_text().strip() if found is not None else ""
    if not text:
        raise FieldNotFoundError(field)
    return text


def extract_uint(node: Tag, selector: str, field: str) -> int:
    return parse_uint(extract_text(node, selector, field), field)


def global_rank(doc: Tag) -> int:
    return extract_uint(doc, SELECTORS["global_rank"], "global_rank")


def local_rank(doc: Tag) -> int:
    return extract_uint(doc, SELECTORS["local_rank"], "local_rank")


def country(doc: Tag) -> str:
    return extract_text(doc, SELECTORS["country"], "country")


def linking_total(doc: Tag) -> int:
    return extract_uint(doc, SELECTORS["linking_total"], "linking_total")


def title(doc: Tag) -> str:
    return extract_text(doc, SELECTORS["title"], "title")


def description(doc: Tag) -> str:
    return extract_text(doc, SELECTORS["description"], "description")


def no_enough_data(doc: Tag) -> bool:
    """データ不足マーカーがあるか."""
    return doc.select_one(SELECTORS["no_data"]) is not None


# --- 表形式の値 ---


def _rows(doc: Tag, field: str) -> list[Tag]:
    """表の行を文書順に返す. コンテナがない・行がない場合は TableAbsentError."""
    tbody = doc.select_one(SELECTORS[field])
    rows = tbody.select(ROW_SELECTORS["row"]) if tbody is not None else []
    if not rows:
        raise TableAbsentError(field)
    return rows


def _cell_text(row: Tag, selector: str) -> str:
    """セルのテキスト. 空セルは空文字（エラーにしない）."""
    found = row.select_one(selector)
    return found.get_text().strip() if found is not None else ""


def _visitor_rank(spans: list[Tag], index: int) -> int:
    text = spans[-1].get_text().strip() if spans else ""
    try:
        return parse_uint(text, "local_rank")
    except MalformedNumberError:
        logger.debug("訪問者 %d 行目の国内順位を読めません: %r", index, text)
        return 0


def visitors(doc: Tag) -> tuple[Visitor, ...]:
    result = []
    for i, tr in enumerate(_rows(doc, "visitors")):
        spans = tr.select(ROW_SELECTORS["visitor_cells"])
        result.append(Visitor(
            country=_cell_text(tr, ROW_SELECTORS["visitor_country"]),
            percent=spans[0].get_text().strip() if spans else "",
            local_rank=_visitor_rank(spans, i),
        ))
    return tuple(result)


def keywords(doc: Tag) -> tuple[Keyword, ...]:
    return tuple(
        Keyword(
            word=_cell_text(tr, ROW_SELECTORS["keyword_word"]),
            percent=_cell_text(tr, ROW_SELECTORS["keyword_percent"]),
        )
        for tr in _rows(doc, "keywords")
    )


def upstreams(doc: Tag) -> tuple[Upstream, ...]:
    return tuple(
        Upstream(
            site=_cell_text(tr, ROW_SELECTORS["upstream_site"]),
            percent=_cell_text(tr, ROW_SELECTORS["upstream_percent"]),
        )
        for tr in _rows(doc, "upstreams")
    )


def links_from(doc: Tag) -> tuple[Link, ...]:
    result = []
    for tr in _rows(doc, "links_from"):
        page = tr.select_one(ROW_SELECTORS["link_page"])
        result.append(Link(
            site=_cell_text(tr, ROW_SELECTORS["link_site"]),
            page=page.get("href", "") if page is not None else "",
        ))
    return tuple(result)


def related(doc: Tag) -> tuple[str, ...]:
    return tuple(
        _cell_text(tr, ROW_SELECTORS["related_site"])
        for tr in _rows(doc, "related")
    )


def categories(doc: Tag) -> tuple[str, ...]:
    """カテゴリ. 1 行にパンくず状に複数のリンクが並ぶので全リンクを順に取る."""
    return tuple(
        a.get_text().strip()
        for tr in _rows(doc, "categories")
        for a in tr.select(ROW_SELECTORS["category"])
    )


def subdomains(doc: Tag) -> tuple[Subdomain, ...]:
    return tuple(
        Subdomain(
            domain=_cell_text(tr, ROW_SELECTORS["subdomain_domain"]),
            percent=_cell_text(tr, ROW_SELECTORS["subdomain_percent"]),
        )
        for tr in _rows(doc, "subdomains")
    )


# 取得順。Site のフィールド名 -> 抽出関数
_PIPELINE: tuple[tuple[str, Callable[[Tag], object]], ...] = (
    ("global_rank", global_rank),
    ("local_rank", local_rank),
    ("main_country", country),
    ("linking_total", linking_total),
    ("title", title),
    ("description", description),
    ("visitors", visitors),
    ("keywords", keywords),
    ("upstreams", upstreams),
    ("links_from", links_from),
    ("related", related),
    ("categories", categories),
    ("subdomains", subdomains),
)


def parse_document(body: bytes | str | IO) -> BeautifulSoup:
    """HTML をパースする.

    Raises:
        DocumentParseError: HTML として読めない
    """
    try:
        return BeautifulSoup(body, "html.parser")
    except (ParserRejectedMarkup, OSError, UnicodeDecodeError) as e:
        raise DocumentParseError(str(e)) from e


def parse(body: bytes | str | IO) -> ParseResult:
    """サイト情報ページの HTML から Site を組み立てる.

    Returns:
        ParseResult。失敗時は最初のエラーと、それまでに取得できた
        フィールドだけが埋まった Site を持つ。
    """
    try:
        doc = parse_document(body)
    except DocumentParseError as e:
        logger.error("HTML パース失敗: %s", e)
        return ParseResult(site=None, error=e)

    if no_enough_data(doc):
        logger.info("統計データなし")
        return ParseResult(site=None, error=NoEnoughDataError())

    fields: dict[str, object] = {}
    for name, extract in _PIPELINE:
        try:
            fields[name] = extract(doc)
        except SiteInfoError as e:
            logger.warning("%s の取得失敗: %s", name, e)
            return ParseResult(site=Site(**fields), error=e)

    return ParseResult(site=Site(**fields))


# --- 取得 ---


def site_info_url(domain: str) -> str:
    return SITEINFO_URL_TEMPLATE.format(domain=quote(domain, safe=""))


def fetch_site_info(url: str, get: GetFunc) -> ParseResult:
    """get(url) でページを取得してパースする.

    get は status_code と content を持つレスポンスを返す任意の関数。
    例外や 200 以外のステータスは TransportError として返す。
    """
    try:
        resp = get(url)
    except requests.RequestException as e:
        logger.error("サイト情報ページ取得失敗: url=%s, error=%s", url, e)
        return ParseResult(site=None, error=TransportError(url, reason=str(e)))

    if resp.status_code != requests.codes.ok:
        logger.error("サイト情報ページ取得失敗: url=%s, status=%d", url, resp.status_code)
        return ParseResult(
            site=None, error=TransportError(url, status_code=resp.status_code)
        )

    return parse(resp.content)


def site_info(
    domain: str,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> ParseResult:
    """ドメインのサイト情報ページを取得してパースする.

    Args:
        domain: 対象ドメイン (例: sberbank.ru)
        session: プロキシやヘッダーを設定済みのセッション。省略時は requests.get
        timeout: リクエストタイムアウト（秒）
    """
    url = site_info_url(domain)
    if session is not None:
        get = partial(session.get, timeout=timeout)
    else:
        get = partial(requests.get, headers=REQUEST_HEADERS, timeout=timeout)
    logger.info("取得中: %s", url)
    return fetch_site_info(url, get)

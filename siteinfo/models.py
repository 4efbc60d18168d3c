"""データモデル定義."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from siteinfo.exceptions import SiteInfoError


@dataclass(frozen=True)
class Visitor:
    """1 か国分の訪問者."""

    country: str
    percent: str  # 例: "83.8%"（書式はページのまま）
    local_rank: int  # その国での順位。取得できなければ 0


@dataclass(frozen=True)
class Keyword:
    """検索エンジンからの上位キーワード."""

    word: str
    percent: str


@dataclass(frozen=True)
class Upstream:
    """直前に訪問されていたサイト."""

    site: str
    percent: str


@dataclass(frozen=True)
class Subdomain:
    """訪問者が向かうサブドメイン."""

    domain: str
    percent: str


@dataclass(frozen=True)
class Link:
    """このサイトへリンクしているサイトとページ."""

    site: str
    page: str  # リンク元ページの URL


@dataclass(frozen=True)
class Site:
    """サイト情報ページから取得したトラフィック統計.

    各リストはページ上の並び順（関連度順）を保持する。
    未取得のフィールドは既定値のまま残る。
    """

    title: str = ""
    description: str = ""
    main_country: str = ""
    global_rank: int = 0
    local_rank: int = 0
    linking_total: int = 0
    visitors: tuple[Visitor, ...] = ()
    keywords: tuple[Keyword, ...] = ()
    upstreams: tuple[Upstream, ...] = ()
    links_from: tuple[Link, ...] = ()
    related: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    subdomains: tuple[Subdomain, ...] = ()

    def to_dict(self) -> dict:
        """JSON 出力用の dict に変換する."""
        return asdict(self)


@dataclass(frozen=True)
class ParseResult:
    """パース結果.

    失敗した場合も、それまでに取得できたフィールドを site に保持する。
    ドキュメント自体が読めない場合とデータ不足の場合は site が None。
    """

    site: Site | None
    error: SiteInfoError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Site:
        """エラーがあれば送出し、なければ Site を返す."""
        if self.error is not None:
            raise self.error
        return self.site

"""サイト情報ページ取得・パースの例外定義.

呼び出し側が失敗の種類で処理を分けられるよう、すべて SiteInfoError の
サブクラスとして定義する。

- NoEnoughDataError: ページ自体が「データ不足」を示している（正常な終了状態）
- FieldNotFoundError / MalformedNumberError / TableAbsentError:
  マークアップ変更の可能性が高い
- TransportError / DocumentParseError: 取得・パース以前の失敗
"""

from __future__ import annotations

from siteinfo.selector_table import FIELD_NAMES


class SiteInfoError(Exception):
    """取得・パース失敗の基底クラス.

    Attributes:
        field: 失敗したフィールド名（フィールドに紐付かない場合は None）
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class NoEnoughDataError(SiteInfoError):
    """ドメインの統計データが存在しない."""

    def __init__(self) -> None:
        super().__init__("no enough data")


class FieldNotFoundError(SiteInfoError):
    """セレクタに一致するノードがない、またはテキストが空."""

    def __init__(self, field: str) -> None:
        super().__init__(f"no {FIELD_NAMES.get(field, field)} found", field)


class MalformedNumberError(SiteInfoError):
    """区切り文字を除去しても整数として読めない."""

    def __init__(self, field: str, text: str) -> None:
        self.text = text
        super().__init__(
            f"malformed {FIELD_NAMES.get(field, field)}: {text!r}", field
        )


class TableAbsentError(SiteInfoError):
    """表のコンテナがない、または行が 0 件."""

    def __init__(self, field: str) -> None:
        super().__init__(f"no {FIELD_NAMES.get(field, field)} found", field)


class TransportError(SiteInfoError):
    """ページ取得に失敗した、または 200 以外のステータスが返った."""

    def __init__(
        self, url: str, status_code: int | None = None, reason: str = ""
    ) -> None:
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"status code: {status_code}, no data for {url}?"
        else:
            message = f"request failed: {url}: {reason}"
        super().__init__(message)


class DocumentParseError(SiteInfoError):
    """入力を HTML としてパースできない."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"cannot parse document: {reason}")

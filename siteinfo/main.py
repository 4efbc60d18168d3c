"""サイト情報取得: メインエントリーポイント.

使い方:
    siteinfo sberbank.ru                 # サイト情報ページを取得してパース
    siteinfo --file testdata/body.html   # 保存済みの HTML をパース

結果は JSON で標準出力に書き出す。失敗時はそれまでに取得できた
フィールドを出力し、終了コード 1 で終わる。
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

import click

from siteinfo.config import LOG_DIR, REQUEST_TIMEOUT
from siteinfo.scraper import parse, site_info


def setup_logging(verbose: bool = False) -> None:
    """ロギングの初期設定."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"siteinfo_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


@click.command()
@click.argument("domain", required=False)
@click.option(
    "--file",
    "html_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Parse a saved HTML page instead of fetching.",
)
@click.option(
    "--timeout",
    type=float,
    default=REQUEST_TIMEOUT,
    show_default=True,
    help="Request timeout in seconds.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def run(
    domain: str | None, html_file: Path | None, timeout: float, verbose: bool
) -> None:
    """Fetch and parse the website-info page for DOMAIN."""
    if (domain is None) == (html_file is None):
        raise click.UsageError("Specify exactly one of DOMAIN or --file.")

    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    if html_file is not None:
        logger.info("ファイルをパース: %s", html_file)
        with html_file.open("rb") as f:
            result = parse(f)
    else:
        result = site_info(domain, timeout=timeout)

    if result.site is not None:
        click.echo(json.dumps(result.site.to_dict(), ensure_ascii=False, indent=2))

    if not result.ok:
        logger.error("失敗: %s", result.error)
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    logger.info("=== サイト情報取得 完了 ===")


if __name__ == "__main__":
    run()

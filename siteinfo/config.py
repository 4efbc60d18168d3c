"""設定モジュール: 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- サイト情報ページ ---
SITEINFO_URL_TEMPLATE = "https://www.alexa.com/siteinfo/{domain}"

# --- User-Agent ---
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)
USER_AGENT: str = os.environ.get("SITEINFO_USER_AGENT", DEFAULT_USER_AGENT)

REQUEST_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept-Language": "en-US,en;q=0.9",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
}

# --- リクエスト設定 ---
REQUEST_TIMEOUT = float(os.environ.get("SITEINFO_REQUEST_TIMEOUT", "15"))  # 秒

# --- ログ ---
LOG_DIR = Path(os.environ.get("SITEINFO_LOG_DIR", _PROJECT_ROOT / "logs"))

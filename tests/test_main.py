"""CLI のテスト."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from siteinfo.exceptions import TransportError
from siteinfo.main import run
from siteinfo.models import ParseResult

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def no_log_files():
    with patch("siteinfo.main.setup_logging"):
        yield


class TestRun:
    """run コマンドのテスト."""

    def test_file(self, runner):
        result = runner.invoke(run, ["--file", str(FIXTURES_DIR / "siteinfo_full.html")])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["global_rank"] == 506
        assert data["visitors"][0] == {
            "country": "Russia", "percent": "83.8%", "local_rank": 17,
        }

    def test_no_data_file(self, runner):
        result = runner.invoke(run, ["--file", str(FIXTURES_DIR / "siteinfo_nodata.html")])

        assert result.exit_code == 1
        assert "no enough data" in result.output

    @patch("siteinfo.main.site_info")
    def test_domain(self, mock_site_info, runner):
        url = "https://www.alexa.com/siteinfo/sberbank.ru"
        mock_site_info.return_value = ParseResult(
            site=None, error=TransportError(url, status_code=503)
        )
        result = runner.invoke(run, ["sberbank.ru", "--timeout", "2"])

        mock_site_info.assert_called_once_with("sberbank.ru", timeout=2.0)
        assert result.exit_code == 1
        assert "status code: 503" in result.output

    def test_requires_one_source(self, runner):
        result = runner.invoke(run, [])
        assert result.exit_code == 2

        result = runner.invoke(
            run, ["sberbank.ru", "--file", str(FIXTURES_DIR / "siteinfo_full.html")]
        )
        assert result.exit_code == 2

"""
Tests for the command-line host.

Runs main() in-process with an argv list; Popen is mocked for --activate.
"""

import sys
from unittest.mock import patch

import pytest
from loguru import logger

from quicksearch.main import build_parser, main


@pytest.fixture(autouse=True)
def _no_env_settings(monkeypatch):
    monkeypatch.delenv("QUICKSEARCH_SETTINGS", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging():
    """main() replaces the loguru sinks; point them back at the real stderr."""
    yield
    logger.remove()
    logger.add(sys.__stderr__)


class TestOutput:
    """Test the printed result list."""

    def test_lists_results(self, capsys):
        assert main(["example.com"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "open-link\tOpen Link\tOpen link in browser",
            "google\tSearch Google\tSearch online with Google",
        ]

    def test_max_results_flag(self, capsys):
        assert main(["--max-results", "1", "example.com"]) == 0
        assert capsys.readouterr().out.splitlines() == ["open-link\tOpen Link\tOpen link in browser"]

    def test_max_results_from_settings(self, tmp_settings, capsys):
        assert main(["--settings", str(tmp_settings), "example.com"]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 1

    def test_print_url(self, capsys):
        assert main(["--print-url", "duckduckgo", "d", "cats"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "https://duckduckgo.com/?q=cats"


    def test_show_icons_uses_configured_size(self, tmp_settings, capsys):
        assert main(["--settings", str(tmp_settings), "--show-icons", "hello"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "google\tSearch Google\tSearch online with Google\tweb-browser-symbolic\t32x32",
        ]

    def test_icon_size_setting(self, tmp_path, capsys):
        path = tmp_path / "settings.toml"
        path.write_text("[icons]\nsize = 24\n")
        assert main(["--settings", str(path), "--show-icons", "d", "cats"]) == 0
        assert capsys.readouterr().out.splitlines()[0].endswith("\t24x24")


class TestActivate:
    def test_activate_opens_with_configured_opener(self, tmp_settings):
        with patch("quicksearch.services.host.subprocess.Popen") as popen:
            assert main(["--settings", str(tmp_settings), "--activate", "google", "hello"]) == 0
        assert popen.call_args.args[0] == ["true", "https://www.google.com/search?q=hello"]

    def test_unknown_action_exits_nonzero(self):
        with patch("quicksearch.services.host.subprocess.Popen") as popen:
            assert main(["--activate", "altavista", "hello"]) == 1
        popen.assert_not_called()


class TestParser:
    def test_terms_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_terms_kept_in_order(self):
        args = build_parser().parse_args(["y", "lo", "fi"])
        assert args.terms == ["y", "lo", "fi"]

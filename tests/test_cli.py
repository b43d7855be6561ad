"""
Spreaker CLI tests.

The first part drives main() in-process against a patched urlopen. The smoke
tests at the end run the CLI as a subprocess against the REAL API and are
skipped unless SPREAKER_TOKEN is set (in the environment or .env).

Run with: python -m pytest tests/test_cli.py -v
"""

import io
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from spreaker_cli.cli import create_parser, main, parse_cuepoint

API = "https://api.spreaker.com/v2"

API_TOKEN = os.environ.get("SPREAKER_TOKEN")
CLI_TIMEOUT = 60  # Timeout in seconds for CLI commands


def run_main(capsys, *args: str) -> tuple[int, str, str]:
    """Run main() and return (exit_code, stdout, stderr)."""
    code = 0
    try:
        main(list(args))
    except SystemExit as e:
        code = e.code or 0
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# =============================================================================
# Parser
# =============================================================================


def test_parser_global_flags():
    args = create_parser().parse_args(["--token", "t", "-o", "plain", "-v", "shows", "get", "5"])

    assert args.token == "t"
    assert args.output == "plain"
    assert args.verbose
    assert args.show_id == 5


def test_parser_tri_state_update_flags():
    args = create_parser().parse_args(["episodes", "update", "5", "--explicit", "false", "--tags", "a, b"])

    assert args.explicit is False
    assert args.tags == ["a", "b"]
    assert args.hidden is None


def test_parse_cuepoint():
    cuepoint = parse_cuepoint("90000:2")

    assert cuepoint.timecode == 90000
    assert cuepoint.ads_max_count == 2
    assert parse_cuepoint("1000").ads_max_count == 1


# =============================================================================
# Commands (patched transport)
# =============================================================================


@pytest.mark.usefixtures("isolated_env")
class TestCommands:
    def test_shows_get_json(self, capsys, fake_api):
        fake_api.reply({"show": {"show_id": 5, "title": "Foo", "last_episode_at": "2024-02-01 10:00:00"}})

        code, out, _ = run_main(capsys, "-o", "json", "shows", "get", "5")

        assert code == 0
        data = json.loads(out)
        assert data["show_id"] == 5
        assert data["title"] == "Foo"
        assert data["last_episode_at"] == "2024-02-01 10:00:00"

    def test_episodes_list_json_includes_cursor(self, capsys, fake_api):
        next_url = f"{API}/shows/5/episodes?limit=1&last_id=10"
        fake_api.reply({"items": [{"episode_id": 10, "title": "Ep"}], "next_url": next_url})

        code, out, _ = run_main(capsys, "-o", "json", "episodes", "list", "5", "--limit", "1")

        assert code == 0
        data = json.loads(out)
        assert [e["episode_id"] for e in data["data"]] == [10]
        assert data["next_url"] == next_url
        assert data["has_more"] is True
        assert fake_api.last_request.full_url == f"{API}/shows/5/episodes?limit=1"

    def test_episodes_list_plain(self, capsys, fake_api):
        fake_api.reply({"items": [{"episode_id": 10, "title": "Ep"}], "next_url": ""})

        code, out, _ = run_main(capsys, "-o", "plain", "episodes", "list", "5")

        assert code == 0
        assert out == "10\tEp\n"

    def test_episodes_list_uses_default_show(self, capsys, fake_api, monkeypatch):
        monkeypatch.setenv("SPREAKER_DEFAULT_SHOW_ID", "99")
        fake_api.reply({"items": [], "next_url": ""})

        code, _, _ = run_main(capsys, "-o", "json", "episodes", "list")

        assert code == 0
        assert fake_api.last_request.full_url == f"{API}/shows/99/episodes"

    def test_table_output(self, capsys, fake_api):
        fake_api.reply({"items": [{"show_id": 1, "title": "Morning Show", "language": "en"}], "next_url": ""})

        code, out, _ = run_main(capsys, "-o", "table", "shows", "list", "--user", "9")

        assert code == 0
        lines = out.splitlines()
        assert lines[0].split() == ["ID", "Title", "Language", "Episodes"]
        assert "Morning Show" in lines[2]

    def test_api_error_exits_with_json_on_stderr(self, capsys, fake_api):
        fake_api.fail(404, code=7, messages=["show not found"])

        code, out, err = run_main(capsys, "-o", "json", "shows", "get", "5")

        assert code == 1
        assert out == ""
        error = json.loads(err)
        assert error["status"] == 404
        assert error["messages"] == ["show not found"]

    def test_me_without_token_fails_locally(self, capsys, fake_api):
        code, _, err = run_main(capsys, "me")

        assert code == 1
        assert "authentication required" in json.loads(err)["error"]
        fake_api.urlopen.assert_not_called()

    def test_login_validates_token(self, capsys, fake_api):
        fake_api.reply({"user": {"user_id": 9, "username": "jane"}})

        code, out, _ = run_main(capsys, "--token", "tok", "-o", "json", "login")

        assert code == 0
        assert json.loads(out)["username"] == "jane"
        assert fake_api.last_request.get_header("Authorization") == "Bearer tok"

    def test_delete_with_force(self, capsys, fake_api):
        fake_api.reply_raw(b"")

        code, out, _ = run_main(capsys, "--token", "tok", "-o", "json", "episodes", "delete", "5", "--force")

        assert code == 0
        assert json.loads(out)["success"] is True
        request = fake_api.last_request
        assert (request.get_method(), request.full_url) == ("DELETE", f"{API}/episodes/5")

    def test_delete_without_force_when_not_interactive(self, capsys, fake_api, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))

        code, _, err = run_main(capsys, "--token", "tok", "shows", "delete", "5")

        assert code == 1
        assert "--force" in json.loads(err)["error"]
        fake_api.urlopen.assert_not_called()

    def test_update_without_fields_is_rejected(self, capsys, fake_api):
        code, _, err = run_main(capsys, "--token", "tok", "shows", "update", "5")

        assert code == 1
        assert "nothing to update" in json.loads(err)["error"]
        fake_api.urlopen.assert_not_called()

    def test_upload_missing_file(self, capsys, fake_api, isolated_env):
        missing = str(isolated_env / "missing.mp3")

        code, _, err = run_main(capsys, "--token", "tok", "episodes", "upload", "3", missing, "--title", "Pilot")

        assert code == 1
        assert json.loads(err)["details"] == {"path": missing}
        fake_api.urlopen.assert_not_called()

    def test_config_show_masks_token(self, capsys):
        code, out, _ = run_main(capsys, "--token", "abcdef123456", "-o", "json", "config", "show")

        assert code == 0
        assert json.loads(out)["token"] == "********3456"

    def test_stats_share_breakdown_json(self, capsys, fake_api):
        fake_api.reply({"statistics": {"country": [{"name": "Italy", "percentage": 70.5}], "city": []}})

        code, out, _ = run_main(capsys, "--token", "tok", "-o", "json", "stats", "shares", "geographics", "shows", "3")

        assert code == 0
        assert json.loads(out) == {"country": [{"name": "Italy", "percentage": 70.5}], "city": []}
        assert fake_api.last_request.full_url == f"{API}/shows/3/statistics/geographics"


# =============================================================================
# Live Smoke Tests
# =============================================================================


def run_cli(*args: str) -> subprocess.CompletedProcess:
    """Run the CLI as a subprocess with JSON output."""
    cmd = [sys.executable, "-m", "spreaker_cli.cli", "-o", "json"] + list(args)
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
        timeout=CLI_TIMEOUT,
        cwd=Path(__file__).resolve().parent.parent,
    )


@pytest.fixture(scope="module")
def require_credentials():
    """Skip test if credentials not available."""
    if not API_TOKEN:
        pytest.skip("SPREAKER_TOKEN required")
    return True


@pytest.mark.usefixtures("require_credentials")
class TestLive:
    def test_me(self):
        result = run_cli("me")
        assert result.returncode == 0, result.stderr
        assert json.loads(result.stdout)["user_id"]

    def test_shows_list(self):
        result = run_cli("shows", "list", "--limit", "1")
        assert result.returncode == 0, result.stderr
        assert "data" in json.loads(result.stdout)

    def test_languages(self):
        result = run_cli("misc", "languages")
        assert result.returncode == 0, result.stderr
        codes = [lang["code"] for lang in json.loads(result.stdout)["data"]]
        assert codes == sorted(codes)

    def test_unknown_show_is_not_found(self):
        result = run_cli("shows", "get", "1")
        if result.returncode == 0:
            pytest.skip("show 1 exists")
        assert json.loads(result.stderr)["status"] == 404

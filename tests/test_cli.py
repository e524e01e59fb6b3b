"""End-to-end exit codes with the network patched out."""

import json
from unittest.mock import MagicMock, patch

import pytest

from o365sub import cli
from o365sub.http.errors import UnauthorizedError

CONFIG = "CLIENT_ID=c\nTENANT_ID=t\nCLIENT_SECRET=s\nPROXY_URL=NONE\n"


@pytest.fixture
def config_file(tmp_path):
    p = tmp_path / "config.ini"
    p.write_text(CONFIG, encoding="utf-8")
    return p


def _answers(*items):
    feed = iter(items)
    return lambda prompt: next(feed)


def test_help_exits_zero(capsys):
    assert cli.main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "Exit Codes" in out
    assert "PROXY_URL" in out


def test_missing_config_exits_one_without_network(tmp_path, capsys):
    with patch("o365sub.http.client.requests.Session") as session_cls:
        code = cli.main(["--config", str(tmp_path / "missing.ini")])
    assert code == 1
    session_cls.assert_not_called()
    assert "❌" in capsys.readouterr().out


def test_token_failure_exits_two(config_file, fake_response, capsys):
    with patch("o365sub.http.client.requests.Session") as session_cls:
        session_cls.return_value.post.return_value = fake_response(200, '{"access_token":"null"}')
        code = cli.main(["--config", str(config_file)])
    assert code == 2
    assert "Failed to retrieve access token" in capsys.readouterr().out


def test_menu_session_exits_zero(config_file, fake_response, capsys):
    with patch("o365sub.http.client.requests.Session") as session_cls:
        session = session_cls.return_value
        session.post.return_value = fake_response(200, json.dumps({"access_token": "tok"}))
        session.request.return_value = fake_response(
            200, '[{"contentType":"Audit.AzureActiveDirectory","status":"enabled","webhook":null}]'
        )
        code = cli.main(["--config", str(config_file)], read=_answers("1", "5"))
    assert code == 0
    session.request.assert_called_once()
    kwargs = session.request.call_args.kwargs
    assert kwargs["url"] == "https://manage.office.com/api/v1.0/t/activity/feed/subscriptions/list"
    assert kwargs["headers"]["Authorization"] == "Bearer tok"
    assert "Audit.AzureActiveDirectory" in capsys.readouterr().out


def test_api_error_exits_three(config_file, capsys):
    token = "tok"
    with patch.object(cli, "acquire_token", return_value=token), \
         patch("o365sub.app.state.HttpClient") as http_cls:
        http_cls.return_value.send_text.side_effect = UnauthorizedError(
            401, "https://manage.office.com/x", "Unauthorized", '{"error":"AF10001"}'
        )
        code = cli.main(["--config", str(config_file)], read=_answers("4"))
    assert code == 3
    assert "API request failed (401)" in capsys.readouterr().out


def test_log_mode_writes_file(config_file, tmp_path):
    log_dir = tmp_path / "logs"
    with patch.object(cli, "acquire_token", return_value="tok"), \
         patch("o365sub.app.state.HttpClient", MagicMock()):
        assert cli.main(["--config", str(config_file), "--log", "--log-dir", str(log_dir)],
                        read=_answers("9", "5")) == 0
    files = list(log_dir.glob("check_o365_subscription_*.log"))
    assert len(files) == 1
    text = files[0].read_text(encoding="utf-8")
    assert " - Script execution started" in text
    assert "Invalid choice selected" in text
    assert "Exiting script" in text


def test_debug_notice(config_file, capsys):
    with patch.object(cli, "acquire_token", return_value="tok"), \
         patch("o365sub.app.state.HttpClient", MagicMock()):
        cli.main(["--config", str(config_file), "--debug"], read=_answers("5"))
    assert "🛠 Debug mode enabled" in capsys.readouterr().out


def _log_text(log_dir):
    files = list(log_dir.glob("check_o365_subscription_*.log"))
    assert len(files) == 1
    return files[0].read_text(encoding="utf-8")


def test_unknown_flag_is_ignored(tmp_path):
    with patch("o365sub.http.client.requests.Session") as session_cls:
        code = cli.main(["--verbose", "--config", str(tmp_path / "missing.ini")])
    assert code == 1
    session_cls.assert_not_called()


def test_flag_without_value_is_a_config_failure(capsys):
    with patch("o365sub.http.client.requests.Session") as session_cls:
        code = cli.main(["--config"])
    assert code == 1
    session_cls.assert_not_called()
    assert "❌ Error: Invalid arguments" in capsys.readouterr().out


def test_config_failure_is_logged(tmp_path, capsys):
    log_dir = tmp_path / "logs"
    missing = tmp_path / "missing.ini"
    code = cli.main(["--config", str(missing), "--log", "--log-dir", str(log_dir)])
    assert code == 1
    message = f"Error: Config file {missing} not found!"
    assert f"❌ {message}" in capsys.readouterr().out
    assert f" - {message}" in _log_text(log_dir)


def test_token_failure_is_logged(config_file, fake_response, tmp_path):
    log_dir = tmp_path / "logs"
    with patch("o365sub.http.client.requests.Session") as session_cls:
        session_cls.return_value.post.return_value = fake_response(200, '{"access_token":"null"}')
        code = cli.main(["--config", str(config_file), "--log", "--log-dir", str(log_dir)])
    assert code == 2
    text = _log_text(log_dir)
    assert " - Failed to retrieve access token" in text
    assert " - Obtaining access token" in text


def test_unusable_log_dir_exits_one(config_file, tmp_path, capsys):
    not_a_dir = tmp_path / "plain-file"
    not_a_dir.write_text("", encoding="utf-8")
    with patch("o365sub.http.client.requests.Session") as session_cls:
        code = cli.main(["--config", str(config_file), "--log", "--log-dir", str(not_a_dir / "sub")])
    assert code == 1
    session_cls.assert_not_called()
    assert "❌ Error: cannot open log file" in capsys.readouterr().out

"""Unit tests for guestwatch.cli."""

import json
from unittest.mock import MagicMock, patch

import pytest

from guestwatch import __version__
from guestwatch.cli import main


@pytest.mark.cli
def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"gwatch {__version__}"


@pytest.mark.cli
def test_no_command_shows_help(capsys):
    assert main([]) == 0
    assert "watcher" in capsys.readouterr().out


@pytest.mark.cli
def test_invalid_display_format(capsys):
    assert main(["--display", "xml", "config", "show"]) == 1


@pytest.mark.cli
def test_config_show_json(capsys):
    assert main(["--display", "json", "config", "show", "watcher"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["section"] == "watcher"
    assert output["content"]["batch_window_secs"] == 1.0


@pytest.mark.cli
def test_config_show_unknown_section_exits_non_zero(capsys):
    assert main(["config", "show", "nope"]) == 1
    assert "Unknown section: nope" in capsys.readouterr().out


@pytest.mark.cli
@patch("guestwatch.cli.watcher._handle_stage_result")
def test_touch_command_passes_path(mock_handle_stage_result, tmp_path):
    mock_executor = MagicMock()
    mock_handle_stage_result.return_value = mock_executor

    assert main(["watcher", "touch", str(tmp_path / "a.go")]) == 0

    mock_executor.assert_called_once_with(tmp_path / "a.go")


@pytest.mark.cli
def test_unknown_command_is_usage_error(capsys):
    assert main(["watcher", "frobnicate"]) == 1
    assert "Usage error" in capsys.readouterr().err


@pytest.mark.cli
def test_config_set_then_show(capsys):
    assert main(["config", "set", "guest.instance", "dev"]) == 0
    capsys.readouterr()

    assert main(["-d", "json", "config", "show", "guest"]) == 0
    assert json.loads(capsys.readouterr().out)["content"]["instance"] == "dev"

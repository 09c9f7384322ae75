from unittest import mock

import pytest

from accelutil.dispatch import Command, handle_internal_command, handle_options


def _record(argv, ctx):
    return ("ran", argv, ctx)


COMMANDS = [Command("list", _record), Command("load-config", _record)]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setenv("MANPATH", "/orig")
    monkeypatch.delenv("ACCFG_MAN_VIEWER", raising=False)


def test_version_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        handle_options(["accel-config", "--version"], "msg", COMMANDS, "4.1")
    assert info.value.code == 0
    assert capsys.readouterr().out == "4.1\n"


def test_short_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        handle_options(["accel-config", "-v"], "msg", COMMANDS, "4.1")
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == "4.1"


def test_list_cmds(capsys):
    with pytest.raises(SystemExit) as info:
        handle_options(["accel-config", "--list-cmds"], "msg", COMMANDS, "4.1")
    assert info.value.code == 0
    assert capsys.readouterr().out.splitlines() == [
        "accel-config list",
        "accel-config load-config",
    ]


def test_known_command_returns():
    result = handle_options(["accel-config", "list", "-i"], "msg", COMMANDS, "4.1")
    assert result is None


def test_unknown_command_exits_with_usage(capsys):
    with pytest.raises(SystemExit) as info:
        handle_options(["accel-config", "bogus"], "msg", COMMANDS, "4.1")
    assert info.value.code == 129
    err = capsys.readouterr().err
    assert "Unknown command: 'bogus'" in err
    assert "Usage: msg" in err


def test_no_arguments_shows_main_page_then_usage():
    with mock.patch("os.execvp", side_effect=OSError(2, "missing")) as execvp:
        with pytest.raises(SystemExit) as info:
            handle_options(["accel-config"], "msg", COMMANDS, "4.1")
    assert info.value.code == 129
    assert execvp.call_args_list == [mock.call("man", ["man", "accel-config"])]


def test_command_help_shows_command_page():
    with mock.patch("os.execvp", side_effect=OSError(2, "missing")) as execvp:
        with pytest.raises(SystemExit) as info:
            handle_options(["accel-config", "list", "--help"], "msg", COMMANDS, "4.1")
    assert info.value.code == 129
    assert execvp.call_args_list == [
        mock.call("man", ["man", "accel-config-list"])
    ]


def test_global_help_with_topic():
    with mock.patch("os.execvp", side_effect=OSError(2, "missing")) as execvp:
        with pytest.raises(SystemExit) as info:
            handle_options(["accel-config", "-h", "list"], "msg", COMMANDS, "4.1")
    assert info.value.code == 129
    assert execvp.call_args_list == [
        mock.call("man", ["man", "accel-config-list"])
    ]


def test_unrecognised_dash_option_exits():
    with pytest.raises(SystemExit) as info:
        handle_options(["accel-config", "--nope"], "msg", COMMANDS, "4.1")
    assert info.value.code == 129


def test_internal_command_dispatches():
    ctx = object()
    result = handle_internal_command(["list", "-i"], ctx, COMMANDS)
    assert result == ("ran", ["list", "-i"], ctx)


def test_internal_command_unknown_raises(capsys):
    with pytest.raises(ValueError):
        handle_internal_command(["nothing"], None, COMMANDS)
    assert "Unknown command: 'nothing'" in capsys.readouterr().err
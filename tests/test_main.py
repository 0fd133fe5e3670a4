import curses

import pytest

from dualtodo import __version__
from dualtodo.__main__ import main, parse_args, run


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert args.config is None
    assert args.data_dir is None
    assert args.log_file is None


def test_parse_args_overrides() -> None:
    args = parse_args(["--data-dir", "todos", "--log-file", "/tmp/x.log", "--config", "c.conf"])

    assert args.data_dir == "todos"
    assert args.log_file == "/tmp/x.log"
    assert args.config == "c.conf"


def test_version_flag_exits(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        parse_args(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


class _FakeScreen:
    """Stands in for a curses window: replays keys, raising curses.error for None."""

    def __init__(self, keys) -> None:
        self.keys = list(keys)

    def keypad(self, flag) -> None:
        pass

    def get_wch(self):
        key = self.keys.pop(0)
        if key is None:
            raise curses.error("no input")
        return key


def test_main_loop_skips_resize_and_read_errors(monkeypatch) -> None:
    frames = []
    monkeypatch.setattr("dualtodo.ui.screen.init_colors", lambda: None)
    monkeypatch.setattr(
        "dualtodo.ui.screen.display",
        lambda state, stdscr, scroll=0: frames.append(state.mode) or scroll,
    )
    screen = _FakeScreen([curses.KEY_RESIZE, None, "e", "a", "\x1b", "q", "never read"])

    state = main(screen)

    assert state.exit_flag
    assert [e.text for e in state.todos.daily] == ["a"]
    assert state.mode == "normal"
    assert screen.keys == ["never read"]
    assert len(frames) == 6


def test_run_applies_flag_overrides(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr("locale.setlocale", lambda category, value=None: "C")
    monkeypatch.setattr("curses.wrapper", lambda func: None)
    log_path = tmp_path / "custom.log"
    data_dir = tmp_path / "todos"

    status = run([
        "--config", str(tmp_path / "absent.conf"),
        "--data-dir", str(data_dir),
        "--log-file", str(log_path),
    ])

    assert status == 0
    log = log_path.read_text()
    assert f"Error listing directory {data_dir}" in log
    assert str(data_dir / "2022_09_27.todo") in log


def test_run_exits_130_on_ctrl_c(tmp_path, monkeypatch) -> None:
    def interrupted(func):
        raise KeyboardInterrupt

    monkeypatch.setenv("ESCDELAY", "25")
    monkeypatch.setattr("locale.setlocale", lambda category, value=None: "C")
    monkeypatch.setattr("curses.wrapper", interrupted)

    status = run([
        "--config", str(tmp_path / "absent.conf"),
        "--data-dir", str(tmp_path),
        "--log-file", str(tmp_path / "run.log"),
    ])

    assert status == 130
    assert "Interrupted." in (tmp_path / "run.log").read_text()

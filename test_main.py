import pytest

import main


@pytest.mark.parametrize(
    "argv, key, expected",
    [
        ([], "path", None),
        (["data.csv"], "path", "data.csv"),
        (["-d", ";", "data.csv"], "delimiter", ";"),
        (["--delimiter", "\t"], "delimiter", "\t"),
        (["--log-level", "DEBUG"], "log_level", "debug"),
        (["-v"], "version", True),
        (["-h"], "help", True),
    ],
)
def test_parse_args(argv, key, expected):
    opts = main.parse_args(argv)
    assert opts[key] == expected


@pytest.mark.parametrize(
    "argv",
    [
        ["-d"],
        ["-d", ";;"],
        ["--log-level", "loud"],
        ["--bogus"],
        ["a.csv", "b.csv"],
    ],
)
def test_parse_args_errors(argv):
    assert isinstance(main.parse_args(argv), str)


def test_version_flag(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_bad_option_exits_2(capsys):
    assert main.main(["--bogus"]) == 2
    assert "Unknown option" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "load_config", lambda: {
        "DELIMITER": ",", "PAGE_SIZE": 10, "COLOR": False, "RELOAD_EACH_COMMAND": True,
        "ROLLBACK_ON_SAVE_FAILURE": False, "HISTORY_SIZE": 100,
    })
    assert main.main([str(tmp_path / "missing.csv")]) == 1
    assert "Unable to load" in capsys.readouterr().err


def test_session_runs_until_quit(tmp_path, monkeypatch, capsys):
    data = tmp_path / "data.csv"
    data.write_text("a,b\nc,d")
    history_path = tmp_path / "cfg" / "history.log"
    monkeypatch.setattr(main, "load_config", lambda: {
        "DELIMITER": ",", "PAGE_SIZE": 10, "COLOR": False, "RELOAD_EACH_COMMAND": True,
        "ROLLBACK_ON_SAVE_FAILURE": False, "HISTORY_SIZE": 100,
    })
    monkeypatch.setattr(main, "ensure_config_dirs", lambda: history_path.parent.mkdir(exist_ok=True))
    monkeypatch.setattr(main, "HISTORY_PATH", str(history_path))
    monkeypatch.setattr(main, "_load_readline", lambda: None)
    lines = iter(["delcol 1", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

    assert main.main([str(data)]) == 0
    assert data.read_text() == "b\nd"
    assert history_path.read_text() == "delcol 1\nquit\n"


class FakeReadline:
    def __init__(self, items):
        self.items = list(items)

    def get_current_history_length(self):
        return len(self.items)

    def remove_history_item(self, pos):
        del self.items[pos]


def test_answer_reader_keeps_answers_out_of_history(monkeypatch):
    rl = FakeReadline(["display 1 3"])

    def fake_input(prompt=""):
        rl.items.append("n")
        return "n"

    monkeypatch.setattr("builtins.input", fake_input)
    read_answer = main._answer_reader(rl)
    assert read_answer("> ") == "n"
    assert rl.items == ["display 1 3"]


def test_answer_reader_leaves_history_alone_when_nothing_added(monkeypatch):
    rl = FakeReadline(["display 1 3", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt="": "n")
    assert main._answer_reader(rl)("> ") == "n"
    assert rl.items == ["display 1 3", "n"]


def test_answer_reader_without_readline():
    assert main._answer_reader(None) is None

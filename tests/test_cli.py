import json

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from impaired.cli import KeyPressChooser, create_parser, main, run_comparisons
from impaired.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from impaired.session import SessionConfig, SessionItem
from impaired.type_hints import LEFT, RIGHT

LANGUAGES = ["Rust", "C++", "Java"]


def _always(side):
    def choose(left, right):
        return side

    return choose


def _interrupt(left, right):
    raise KeyboardInterrupt


def test_parser_flags():
    args = create_parser().parse_args(["--no-retain", "--no-scores", "a", "b"])
    assert args.items == ["a", "b"]
    assert args.no_retain
    assert args.no_scores
    assert args.output is None


def test_run_comparisons_presents_every_pair(capsys):
    seen = []

    def choose(left, right):
        seen.append({left.text, right.text})
        return RIGHT

    session = run_comparisons(LANGUAGES, SessionConfig(), choose)

    assert len(seen) == 3
    assert session.is_complete
    out = capsys.readouterr().out
    assert "A: " in out and "B: " in out
    assert "[3/3]" in out


def test_main_prints_scores(capsys):
    assert main(LANGUAGES, chooser=_always(LEFT)) == EXIT_OK
    out = capsys.readouterr().out
    assert "Final scores:" in out
    assert out.count("votes") == 3


def test_main_without_scores(capsys):
    assert main(["--no-scores", *LANGUAGES], chooser=_always(LEFT)) == EXIT_OK
    assert "Final scores:" not in capsys.readouterr().out


def test_main_without_items(capsys):
    assert main([], chooser=_always(LEFT)) == EXIT_FAILURE
    assert "USAGE: impaired item1 item2" in capsys.readouterr().err


def test_main_writes_standings(tmp_path):
    output = tmp_path / "standings.json"
    assert main(["--output", str(output), *LANGUAGES], chooser=_always(LEFT)) == 0

    summary = json.loads(output.read_text(encoding="utf-8"))
    assert summary["complete"] is True
    assert len(summary["standings"]) == 3
    assert sum(entry["score"] for entry in summary["standings"]) == 3


def test_main_interrupted():
    assert main(LANGUAGES, chooser=_interrupt) == EXIT_INTERRUPTED


def test_main_with_bad_config(tmp_path):
    config = tmp_path / "bad.json"
    config.write_text('{"left_key": "b"}', encoding="utf-8")
    assert main(["--config", str(config), *LANGUAGES], chooser=_always(LEFT)) == 1


def test_main_with_config_file(tmp_path, capsys):
    config = tmp_path / "impaired.json"
    config.write_text('{"show_scores": false}', encoding="utf-8")
    assert main(["--config", str(config), *LANGUAGES], chooser=_always(RIGHT)) == 0
    assert "Final scores:" not in capsys.readouterr().out


def _press(keys, config=None):
    """Feed ``keys`` to a keypress chooser and return its answer."""
    chooser = KeyPressChooser(config or SessionConfig())
    left, right = SessionItem.from_text("Rust"), SessionItem.from_text("C++")
    with create_pipe_input() as pipe:
        pipe.send_text(keys)
        with create_app_session(input=pipe, output=DummyOutput()):
            return chooser(left, right)


@pytest.mark.parametrize(
    "keys, side",
    [("a", LEFT), ("A", LEFT), ("b", RIGHT), ("xB", RIGHT), ("\rA", LEFT)],
)
def test_keypress_picks_a_side(keys, side):
    assert _press(keys) == side


def test_keypress_uses_configured_keys():
    config = SessionConfig(left_key="j", right_key="k")
    assert _press("abk", config) == RIGHT


@pytest.mark.parametrize("keys", ["q", "Q", "\x03"])
def test_keypress_quit_aborts(keys):
    with pytest.raises(KeyboardInterrupt):
        _press(keys)

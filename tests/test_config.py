import json

import pytest

from impaired.exceptions import (
    FileLoadException,
    InvalidConfigurationException,
    MissingConfigurationException,
)
from impaired.session import SessionConfig, load_config


def _write(tmp_path, content):
    path = tmp_path / "impaired.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults():
    config = SessionConfig()
    assert config.retain_winner
    assert config.show_scores
    assert (config.left_key, config.right_key, config.quit_key) == ("a", "b", "q")


def test_load_config(tmp_path):
    path = _write(
        tmp_path,
        json.dumps({"retain_winner": False, "left_key": "j", "right_key": "k"}),
    )
    config = load_config(path)

    assert not config.retain_winner
    assert config.left_key == "j"
    assert config.right_key == "k"
    assert config.quit_key == "q"


def test_round_trip_through_dict():
    config = SessionConfig(show_scores=False, quit_key="x")
    assert SessionConfig.from_dict(config.to_dict()) == config


def test_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        load_config(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        '{"left_key": "ab"}',
        '{"left_key": "A", "right_key": "a"}',
        '{"retain_winner": "yes"}',
    ],
)
def test_invalid_config(tmp_path, content):
    with pytest.raises(InvalidConfigurationException):
        load_config(_write(tmp_path, content))


def test_unknown_keys_are_ignored(tmp_path, caplog):
    config = load_config(_write(tmp_path, '{"theme": "dark"}'))
    assert config == SessionConfig()
    assert "unknown configuration keys" in caplog.text


def test_null_setting_is_missing(tmp_path):
    with pytest.raises(MissingConfigurationException):
        load_config(_write(tmp_path, '{"quit_key": null}'))

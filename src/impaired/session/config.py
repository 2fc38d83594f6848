"""SessionConfig data class."""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from impaired.constants import DEFAULT_LEFT_KEY, DEFAULT_QUIT_KEY, DEFAULT_RIGHT_KEY
from impaired.exceptions import (
    FileLoadException,
    InvalidConfigurationException,
    MissingConfigurationException,
)
from impaired.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SessionConfig:
    """Comparison session settings.

    Attributes
    ----------
    retain_winner : bool
        Keep the previous winner in the next comparison. When False the
        comparisons are presented in generation order.
    left_key : str
        Key choosing the left item in the terminal loop.
    right_key : str
        Key choosing the right item in the terminal loop.
    quit_key : str
        Key aborting the terminal loop.
    show_scores : bool
        Print the final scores when the comparisons are done.
    """

    retain_winner: bool = True
    left_key: str = DEFAULT_LEFT_KEY
    right_key: str = DEFAULT_RIGHT_KEY
    quit_key: str = DEFAULT_QUIT_KEY
    show_scores: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check the key bindings.

        Raises
        ------
        InvalidConfigurationException
            If a key is not a single character or two actions share a key.
        """
        keys = {
            "left_key": self.left_key,
            "right_key": self.right_key,
            "quit_key": self.quit_key,
        }
        for name, key in keys.items():
            if not isinstance(key, str) or len(key) != 1:
                raise InvalidConfigurationException(
                    f"{name} must be a single character, got {key!r}"
                )
        if len({key.lower() for key in keys.values()}) != len(keys):
            raise InvalidConfigurationException(
                f"Keys must be distinct (case-insensitive): {keys}"
            )
        for name in ("retain_winner", "show_scores"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidConfigurationException(f"{name} must be true or false")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "retain_winner": self.retain_winner,
            "left_key": self.left_key,
            "right_key": self.right_key,
            "quit_key": self.quit_key,
            "show_scores": self.show_scores,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary.

        Raises ``MissingConfigurationException`` if a setting is given as null.
        """
        known = cls().to_dict()
        unknown = set(data) - set(known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", sorted(unknown))
        for name in known:
            if name in data and data[name] is None:
                raise MissingConfigurationException(f"{name} has no value")
        return cls(
            retain_winner=data.get("retain_winner", True),
            left_key=data.get("left_key", DEFAULT_LEFT_KEY),
            right_key=data.get("right_key", DEFAULT_RIGHT_KEY),
            quit_key=data.get("quit_key", DEFAULT_QUIT_KEY),
            show_scores=data.get("show_scores", True),
        )


def load_config(path: Union[str, Path]) -> SessionConfig:
    """Load a session configuration from a JSON file.

    Raises
    ------
    FileLoadException
        If the file cannot be read.
    InvalidConfigurationException
        If the file is not a JSON object or holds invalid values.
    MissingConfigurationException
        If a setting is given as null.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileLoadException(f"Cannot read configuration {path}: {e}") from e
    except ValueError as e:
        raise InvalidConfigurationException(f"Malformed JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(
            f"Configuration {path} must contain a JSON object"
        )
    logger.debug("Loaded configuration from %s", path)
    return SessionConfig.from_dict(data)

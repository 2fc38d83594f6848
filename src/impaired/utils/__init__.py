"""Shared helpers for Impaired: logging setup and item hashing."""

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

import hashlib
import logging
import sys

from impaired.constants import HANDLE_LENGTH, LOG_DATE_FORMAT, LOG_FORMAT


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return the module logger for ``name``.

    The ``impaired`` package logger gets a single stderr handler the first time
    any module asks for a logger. Module loggers propagate to it, so raising
    the level of the package or root logger (``--verbose``) affects all of them.
    """
    root = logging.getLogger("impaired")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)
    return logging.getLogger(name)


def item_hash(text: str) -> str:
    """Stable content hash used as the handle of an item.

    Examples
    --------
    >>> item_hash("Rust") == item_hash("Rust")
    True
    >>> len(item_hash("Rust"))
    16
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return digest[:HANDLE_LENGTH]

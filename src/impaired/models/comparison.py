"""Comparison of two items, the unit presented to a user."""

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

from typing import Any, Dict, Tuple

from impaired.exceptions import InvalidComparisonException, InvalidWinnerException
from impaired.models.item import Item


class Comparison:
    """Two items that should be compared to each other.

    The order of the items does not matter: ``Comparison(a, b)`` equals
    ``Comparison(b, a)`` and both hash identically. There is no special
    property or priority to either ``left`` or ``right``.

    Raises
    ------
    InvalidComparisonException
        If both sides are the same item.
    """

    __slots__ = ("_left", "_right", "_members")

    def __init__(self, left: Item, right: Item) -> None:
        if left == right:
            raise InvalidComparisonException(f"Cannot compare '{left}' with itself")
        self._left = left
        self._right = right
        # Unordered view of the two members, shared by __eq__ and __hash__
        self._members = frozenset((left, right))

    @property
    def left(self) -> Item:
        return self._left

    @property
    def right(self) -> Item:
        return self._right

    @property
    def items(self) -> Tuple[Item, Item]:
        """Both items, in storage order."""
        return self._left, self._right

    def other(self, item: Item) -> Item:
        """Return the item compared against ``item``.

        Raises
        ------
        InvalidWinnerException
            If ``item`` is not part of this comparison.
        """
        if item == self._left:
            return self._right
        if item == self._right:
            return self._left
        raise InvalidWinnerException(f"'{item}' is not part of {self}")

    def shares_item_with(self, other: "Comparison") -> bool:
        """Check if the two comparisons have at least one item in common."""
        return bool(self._members & other._members)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize comparison to dictionary."""
        return {"left": self._left.value, "right": self._right.value}

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __iter__(self):
        return iter((self._left, self._right))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comparison):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"Comparison({self._left!r}, {self._right!r})"

    def __str__(self) -> str:
        return f"'{self._left}' vs. '{self._right}'"

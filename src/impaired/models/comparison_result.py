"""Comparison result data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from impaired.models.comparison import Comparison
from impaired.models.item import Item


@dataclass(frozen=True)
class ComparisonResult:
    """Represents the outcome of a single comparison.

    Attributes
    ----------
    comparison : Comparison
        The comparison that was decided.
    winner : Item
        The item that was chosen.
    loser : Item
        The other item of the comparison.
    """

    comparison: Comparison
    winner: Item
    loser: Item

    @classmethod
    def from_winner(cls, comparison: Comparison, winner: Item) -> "ComparisonResult":
        """Build the result of ``comparison`` won by ``winner``.

        Raises ``InvalidWinnerException`` if the winner is not part of the comparison.
        """
        return cls(comparison=comparison, winner=winner, loser=comparison.other(winner))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize comparison result to dictionary."""
        return {"winner": self.winner.value, "loser": self.loser.value}

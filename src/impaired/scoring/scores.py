"""Win counting for pairwise comparisons."""

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

from typing import Dict, Iterator, Optional

from impaired.constants import LOSS_POINTS, WIN_POINTS
from impaired.exceptions import InvalidResultException
from impaired.models import ComparisonResult, Item
from impaired.type_hints import RankedScores, ScoreMap, Standings


class Scores:
    """Track scores for a pairwise comparison.

    The score of an item is the number of times it was chosen over another
    item. Items enter the scores the first time they are tracked, as winner
    or loser; items never tracked are absent rather than zero. Scores only
    ever grow.

    Examples
    --------
    >>> rust, cpp = Item("Rust"), Item("C++")
    >>> scores = Scores()
    >>> scores.track(rust, cpp)
    >>> scores[rust], scores[cpp]
    (1, 0)
    >>> scores.get(Item("Java")) is None
    True
    """

    def __init__(self) -> None:
        self._scores: Dict[Item, int] = {}

    def track(self, winner: Item, loser: Item) -> None:
        """Track the result of a single comparison.

        The winner's score increases by one. The loser's score is kept as is,
        although it is set to zero if the loser has not been tracked yet.

        Raises
        ------
        InvalidResultException
            If winner and loser are the same item.
        """
        if winner == loser:
            raise InvalidResultException(f"'{winner}' cannot win against itself")
        self._scores[winner] = self._scores.get(winner, LOSS_POINTS) + WIN_POINTS
        self._scores.setdefault(loser, LOSS_POINTS)

    def track_result(self, result: ComparisonResult) -> None:
        """Track a result handed back by a sequencer."""
        self.track(result.winner, result.loser)

    def get(self, item: Item) -> Optional[int]:
        """Score of ``item``, or None if it was never tracked."""
        return self._scores.get(item)

    def all(self) -> ScoreMap:
        """Copy of the mapping from every tracked item to its score."""
        return dict(self._scores)

    def total(self) -> int:
        """Number of wins tracked so far, i.e. the number of tracked results."""
        return sum(self._scores.values())

    def ranked(self) -> RankedScores:
        """Items and scores from best to worst.

        Equal scores are listed in item order so the listing is stable.
        """
        return sorted(self._scores.items(), key=lambda entry: (-entry[1], entry[0]))

    def standings(self) -> Standings:
        """Ranked items using standard competition ranking (1, 2, 2, 4, ...)."""
        standings: Standings = []
        rank = 0
        previous_score: Optional[int] = None
        for position, (item, score) in enumerate(self.ranked(), start=1):
            if score != previous_score:
                rank = position
                previous_score = score
            standings.append((rank, item, score))
        return standings

    def __getitem__(self, item: Item) -> int:
        return self._scores[item]

    def __contains__(self, item: object) -> bool:
        return item in self._scores

    def __iter__(self) -> Iterator[Item]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return f"Scores({self._scores!r})"

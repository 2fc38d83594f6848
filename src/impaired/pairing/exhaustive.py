"""Exhaustive generation of all comparisons for a collection of items."""

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

from typing import AbstractSet, Dict, Iterable, Iterator, List

from impaired.models import Comparison, Item
from impaired.pairing.sequencer import InOrderSequencer, RetainItemSequencer
from impaired.utils import setup_logger

logger = setup_logger(__name__)


class Comparisons:
    """The complete set of comparisons over a list of items.

    For each provided item there is exactly one comparison against every other
    item, so N distinct items give N * (N - 1) / 2 comparisons. Fewer than two
    items give no comparisons at all.

    The input is not deduplicated. Duplicate items produce comparisons that are
    equal to each other and collapse into one, and the comparison of an item
    with its own duplicate is skipped.

    There is no guarantee about the order of the comparisons; do not rely on it.

    Examples
    --------
    >>> rust, cpp, java = Item("Rust"), Item("C++"), Item("Java")
    >>> comparisons = Comparisons([rust, cpp, java])
    >>> len(comparisons)
    3
    >>> Comparison(rust, java) in comparisons
    True
    """

    def __init__(self, items: Iterable[Item]) -> None:
        # dict keys as an insertion-ordered set
        self._comparisons: Dict[Comparison, None] = {}

        remaining: List[Item] = list(items)
        while remaining:
            item = remaining.pop()
            for other in remaining:
                if item == other:
                    logger.debug("Skipping self comparison of duplicate '%s'", item)
                    continue
                self._comparisons.setdefault(Comparison(item, other), None)

        logger.debug("Generated %d comparisons", len(self._comparisons))

    def retain_item_sequencer(self) -> RetainItemSequencer:
        """Sequence the comparisons such that the previous winner stays on.

        See :class:`~impaired.pairing.sequencer.RetainItemSequencer`.
        """
        return RetainItemSequencer(self)

    def in_order_sequencer(self) -> InOrderSequencer:
        """Sequence the comparisons in generation order."""
        return InOrderSequencer(self)

    def __len__(self) -> int:
        return len(self._comparisons)

    def __iter__(self) -> Iterator[Comparison]:
        return iter(self._comparisons)

    def __contains__(self, comparison: object) -> bool:
        return comparison in self._comparisons

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Comparisons):
            return self._comparisons.keys() == other._comparisons.keys()
        if isinstance(other, AbstractSet):
            return self._comparisons.keys() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Comparisons({list(self._comparisons)!r})"


def build_pairs(items: Iterable[Item]) -> Comparisons:
    """Build every unordered comparison of the given items."""
    return Comparisons(items)

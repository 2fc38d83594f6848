"""Sequencing of comparisons for presentation.

A sequencer hands out the comparisons of a comparison set one at a time and
lets the caller report which item won each of them. Every comparison is handed
out exactly once; afterwards the sequencer is exhausted and keeps returning
``None``.

Two call styles are supported. Either report on the sequencer directly::

    sequencer = comparisons.retain_item_sequencer()
    while (step := sequencer.next_comparison()) is not None:
        comparison, _ = step
        sequencer.report_winner(choose(comparison))

or use the tracker returned with each comparison, e.g. in a ``for`` loop::

    for comparison, tracker in comparisons.retain_item_sequencer():
        tracker.winner(choose(comparison))
"""

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

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum, auto
from typing import Deque, Dict, Iterable, Optional, Tuple

from impaired.exceptions import SequencerStateException
from impaired.models import Comparison, ComparisonResult, Item
from impaired.utils import setup_logger

logger = setup_logger(__name__)


class SequencerState(Enum):
    """Lifecycle of a sequencer."""

    FRESH = auto()  # Nothing handed out yet
    AWAITING_RESULT = auto()  # A comparison was handed out
    EXHAUSTED = auto()  # No comparisons remain


class ResultTracker:
    """Single-use handle to report the winner of one handed-out comparison.

    The tracker only stays valid until the sequencer hands out the next
    comparison; a result reported after that would describe a comparison the
    sequencer has already moved past.
    """

    __slots__ = ("_sequencer", "_comparison", "_used")

    def __init__(self, sequencer: "Sequencer", comparison: Comparison) -> None:
        self._sequencer = sequencer
        self._comparison = comparison
        self._used = False

    @property
    def comparison(self) -> Comparison:
        return self._comparison

    @property
    def used(self) -> bool:
        return self._used

    def winner(self, winner: Item) -> ComparisonResult:
        """Track the winner of the comparison this tracker belongs to.

        Raises
        ------
        SequencerStateException
            If the tracker was used before or is stale.
        InvalidWinnerException
            If ``winner`` is not part of the comparison.
        """
        if self._used:
            raise SequencerStateException(
                f"Result for {self._comparison} was already tracked"
            )
        result = self._sequencer._record_result(self._comparison, winner)
        self._used = True
        return result

    def __repr__(self) -> str:
        return f"ResultTracker({self._comparison!r}, used={self._used})"


class Sequencer(ABC):
    """Base class for stateful, no-repeat sequencing of comparisons.

    Subclasses decide which remaining comparison comes next (``_select``) and
    how a handed-out comparison is removed from the pool (``_consume``); the
    state machine and result reporting live here.
    """

    def __init__(self) -> None:
        self._state = SequencerState.FRESH
        self._previous: Optional[Comparison] = None
        self._previous_result: Optional[ComparisonResult] = None
        self._emitted = 0

    @property
    def state(self) -> SequencerState:
        return self._state

    @property
    def previous_comparison(self) -> Optional[Comparison]:
        """The comparison handed out most recently, if any."""
        return self._previous

    @property
    def emitted(self) -> int:
        """Number of comparisons handed out so far."""
        return self._emitted

    @property
    @abstractmethod
    def remaining(self) -> int:
        """Number of comparisons not handed out yet."""

    @abstractmethod
    def _select(self) -> Optional[Comparison]:
        """Pick the next comparison without removing it, or None if none remain."""

    @abstractmethod
    def _consume(self, comparison: Comparison) -> None:
        """Remove a handed-out comparison so it is never selected again."""

    def next_comparison(self) -> Optional[Tuple[Comparison, ResultTracker]]:
        """Hand out the next comparison together with its result tracker.

        Returns None once every comparison has been handed out, on this and
        every later call.
        """
        if self._state is SequencerState.EXHAUSTED:
            return None

        comparison = self._select()
        if comparison is None:
            logger.debug("Sequencer exhausted after %d comparisons", self._emitted)
            self._state = SequencerState.EXHAUSTED
            self._previous_result = None
            return None

        self._consume(comparison)
        self._previous = comparison
        # A reported result only steers the very next selection
        self._previous_result = None
        self._state = SequencerState.AWAITING_RESULT
        self._emitted += 1
        return comparison, ResultTracker(self, comparison)

    def report_winner(self, winner: Item) -> ComparisonResult:
        """Track the winner of the comparison handed out most recently.

        Reporting again before the next comparison replaces the earlier result.

        Raises
        ------
        SequencerStateException
            If no comparison is awaiting a result.
        InvalidWinnerException
            If ``winner`` is not part of the most recent comparison.
        """
        if self._previous is None or self._state is not SequencerState.AWAITING_RESULT:
            raise SequencerStateException(
                f"No comparison is awaiting a result (state: {self._state.name})"
            )
        return self._record_result(self._previous, winner)

    def _record_result(self, comparison: Comparison, winner: Item) -> ComparisonResult:
        awaiting = self._state is SequencerState.AWAITING_RESULT
        if not awaiting or comparison is not self._previous:
            raise SequencerStateException(
                f"Cannot track a result for {comparison}, the sequencer has moved on"
            )
        result = ComparisonResult.from_winner(comparison, winner)
        self._previous_result = result
        logger.debug("Tracked winner '%s' over '%s'", result.winner, result.loser)
        return result

    def __iter__(self) -> "Sequencer":
        return self

    def __next__(self) -> Tuple[Comparison, ResultTracker]:
        step = self.next_comparison()
        if step is None:
            raise StopIteration
        return step


class InOrderSequencer(Sequencer):
    """Hands out comparisons in the order they were generated, ignoring results."""

    def __init__(self, comparisons: Iterable[Comparison]) -> None:
        super().__init__()
        self._queue: Deque[Comparison] = deque(dict.fromkeys(comparisons))

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def _select(self) -> Optional[Comparison]:
        return self._queue[0] if self._queue else None

    def _consume(self, comparison: Comparison) -> None:
        self._queue.popleft()


class RetainItemSequencer(Sequencer):
    """Sequencer that keeps the previous winner in the next comparison.

    The next comparison is chosen around an anchor: the winner and loser of
    the previous comparison if a winner was reported, otherwise the two items
    of the previous comparison. A remaining comparison of the winner (first
    anchor item) is preferred, then one of the loser. Without any result
    tracked, one item of a comparison therefore still carries over to the
    next, although which one is not guaranteed.

    When neither anchor item has comparisons left but others remain, the
    sequence continues with an arbitrary remaining comparison, so every
    comparison is handed out exactly once.
    """

    def __init__(self, comparisons: Iterable[Comparison]) -> None:
        super().__init__()
        # item -> its comparisons not handed out yet (dict keys as ordered set).
        # Items without pending comparisons are dropped from the index.
        self._pending: Dict[Item, Dict[Comparison, None]] = {}
        unique = dict.fromkeys(comparisons)
        for comparison in unique:
            for item in comparison:
                self._pending.setdefault(item, {})[comparison] = None
        self._remaining = len(unique)

    @property
    def remaining(self) -> int:
        return self._remaining

    def remaining_for(self, item: Item) -> int:
        """Number of comparisons containing ``item`` that were not handed out yet."""
        return len(self._pending.get(item, ()))

    def _anchor(self) -> Optional[Tuple[Item, Item]]:
        if self._previous_result is not None:
            return self._previous_result.winner, self._previous_result.loser
        if self._previous is not None:
            return self._previous.items
        return None

    def _first_pending(self, item: Item) -> Optional[Comparison]:
        pending = self._pending.get(item)
        if not pending:
            return None
        return next(iter(pending))

    def _seed(self) -> Optional[Comparison]:
        for pending in self._pending.values():
            return next(iter(pending))
        return None

    def _select(self) -> Optional[Comparison]:
        anchor = self._anchor()
        if anchor is not None:
            for item in anchor:
                candidate = self._first_pending(item)
                if candidate is not None:
                    return candidate
            if self._pending:
                logger.debug(
                    "No comparisons left for '%s' or '%s', reseeding",
                    anchor[0],
                    anchor[1],
                )

        seed = self._seed()
        if seed is not None:
            logger.debug("Seeding sequence with %s", seed)
        return seed

    def _consume(self, comparison: Comparison) -> None:
        for item in comparison:
            pending = self._pending[item]
            del pending[comparison]
            if not pending:
                del self._pending[item]
        self._remaining -= 1

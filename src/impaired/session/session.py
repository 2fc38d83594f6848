"""Comparison session addressed by item handles.

A session bundles everything one ranking run needs: the queued items, the
comparison set, the sequencer and the scores. Front-ends (the terminal loop,
the desktop window) own a session and refer to items by their handle, a
content hash of the item text, instead of holding core objects.

A session is not thread-safe. A host exposing one session to concurrent
callers must guard the whole session with one lock, since the sequencer
and scores are updated together.
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

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from impaired.exceptions import (
    InvalidResultException,
    ItemNotFoundException,
    SessionStateException,
)
from impaired.models import ComparisonResult, Item, ItemCard
from impaired.pairing import Comparisons, Sequencer, SequencerState
from impaired.scoring import Scores
from impaired.session.config import SessionConfig
from impaired.type_hints import ItemHandle
from impaired.utils import item_hash, setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class SessionItem:
    """An item as seen from outside the session.

    Attributes
    ----------
    handle : str
        Content hash of ``text``, stable across sessions and processes.
    text : str
        The item text, a plain title or a JSON card object.
    """

    handle: ItemHandle
    text: str

    @classmethod
    def from_text(cls, text: str) -> "SessionItem":
        return cls(handle=item_hash(text), text=text)

    @property
    def card(self) -> ItemCard:
        return ItemCard.from_text(self.text)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session item to dictionary."""
        return {"hash": self.handle, "item": self.text}

    def __str__(self) -> str:
        return self.text


class ComparisonSession:
    """One pairwise ranking run, from queued items to final scores.

    Typical use::

        session = ComparisonSession()
        for text in ("Rust", "C++", "Java"):
            session.push_item(text)
        while (pair := session.next_comparison()) is not None:
            left, right = pair
            session.track_result(left.handle, right.handle)
        print(session.standings())
    """

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config: SessionConfig = config if config is not None else SessionConfig()
        self._pending: Dict[ItemHandle, SessionItem] = {}
        self._items: Dict[ItemHandle, Item] = {}
        self._comparisons: Optional[Comparisons] = None
        self._sequencer: Optional[Sequencer] = None
        self._scores: Optional[Scores] = None
        self._current_tracked = False

    # --- Setup ---

    def push_item(self, text: str) -> SessionItem:
        """Queue an item for the next comparison run.

        Pushing the same text twice queues it once.

        Raises
        ------
        SessionStateException
            If a comparison run is ongoing.
        """
        if self.has_ongoing:
            raise SessionStateException(
                "Cannot add items while a comparison is ongoing, reset it first"
            )
        item = SessionItem.from_text(text)
        if item.handle in self._pending:
            logger.debug("Item '%s' is already queued", text)
            return self._pending[item.handle]
        self._pending[item.handle] = item
        return item

    @property
    def pending_items(self) -> List[SessionItem]:
        """Items queued for the next run."""
        return list(self._pending.values())

    @property
    def items(self) -> List[SessionItem]:
        """Items of the ongoing run."""
        return [self._to_session_item(item) for item in self._items.values()]

    @property
    def has_ongoing(self) -> bool:
        return self._sequencer is not None

    @property
    def is_complete(self) -> bool:
        """Whether the ongoing run has handed out all of its comparisons."""
        return (
            self._sequencer is not None
            and self._sequencer.state is SequencerState.EXHAUSTED
        )

    @property
    def progress(self) -> Tuple[int, int]:
        """(comparisons handed out, total comparisons) of the ongoing run."""
        if self._sequencer is None or self._comparisons is None:
            return 0, 0
        return self._sequencer.emitted, len(self._comparisons)

    def start(self) -> None:
        """Start a comparison run over the queued items and clear the queue.

        Raises
        ------
        SessionStateException
            If a comparison run is already ongoing.
        """
        if self.has_ongoing:
            raise SessionStateException("A comparison is already ongoing")

        self._items = {
            handle: Item(entry.text) for handle, entry in self._pending.items()
        }
        self._pending.clear()
        self._comparisons = Comparisons(self._items.values())
        if self.config.retain_winner:
            self._sequencer = self._comparisons.retain_item_sequencer()
        else:
            self._sequencer = self._comparisons.in_order_sequencer()
        self._scores = Scores()
        self._current_tracked = False
        logger.info(
            "Started comparison of %d items (%d comparisons)",
            len(self._items),
            len(self._comparisons),
        )

    def reset(self) -> None:
        """Discard the ongoing run. Queued items are kept."""
        if self.has_ongoing:
            logger.info("Discarding ongoing comparison")
        self._items = {}
        self._comparisons = None
        self._sequencer = None
        self._scores = None
        self._current_tracked = False

    # --- Comparing ---

    def next_comparison(self) -> Optional[Tuple[SessionItem, SessionItem]]:
        """Next pair to present, starting a run first if none is ongoing.

        Returns None when the run has no comparisons left.
        """
        if self._sequencer is None:
            self.start()
        assert self._sequencer is not None

        step = self._sequencer.next_comparison()
        if step is None:
            return None
        comparison, _ = step
        self._current_tracked = False
        return (
            self._to_session_item(comparison.left),
            self._to_session_item(comparison.right),
        )

    def track_result(
        self, winner_handle: ItemHandle, loser_handle: ItemHandle
    ) -> ComparisonResult:
        """Record that ``winner_handle`` beat ``loser_handle`` in the current pair.

        Raises
        ------
        SessionStateException
            If no comparison is ongoing.
        ItemNotFoundException
            If a handle is unknown to the ongoing run.
        InvalidResultException
            If the two items are not the current pair or the pair was already
            tracked.
        """
        if self._sequencer is None or self._scores is None:
            raise SessionStateException("No comparison is ongoing")

        winner = self._lookup(winner_handle)
        loser = self._lookup(loser_handle)

        current = self._sequencer.previous_comparison
        awaiting = self._sequencer.state is SequencerState.AWAITING_RESULT
        if current is None or not awaiting:
            raise InvalidResultException("No comparison is awaiting a result")
        if winner not in current or loser not in current or winner == loser:
            raise InvalidResultException(
                f"'{winner}' vs. '{loser}' is not the current comparison ({current})"
            )
        if self._current_tracked:
            raise InvalidResultException(f"Result for {current} was already tracked")

        result = self._sequencer.report_winner(winner)
        self._scores.track_result(result)
        self._current_tracked = True
        logger.debug("Tracking result for winner=%s, loser=%s", winner, loser)
        return result

    # --- Results ---

    def scores(self) -> List[Tuple[SessionItem, int]]:
        """Scores of the ongoing run, best first."""
        if self._scores is None:
            return []
        return [
            (self._to_session_item(item), score)
            for item, score in self._scores.ranked()
        ]

    def standings(self) -> List[Tuple[int, SessionItem, int]]:
        """(rank, item, score) of the ongoing run, best first."""
        if self._scores is None:
            return []
        return [
            (rank, self._to_session_item(item), score)
            for rank, item, score in self._scores.standings()
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the run, ready for JSON export."""
        done, total = self.progress
        return {
            "items": len(self._items),
            "comparisons": total,
            "presented": done,
            "complete": self.is_complete,
            "standings": [
                {"rank": rank, **item.to_dict(), "score": score}
                for rank, item, score in self.standings()
            ],
        }

    # --- Helpers ---

    def _lookup(self, handle: ItemHandle) -> Item:
        try:
            return self._items[handle]
        except KeyError:
            raise ItemNotFoundException(
                f"No item with handle {handle!r} in the ongoing comparison"
            ) from None

    @staticmethod
    def _to_session_item(item: Item) -> SessionItem:
        return SessionItem.from_text(item.value)

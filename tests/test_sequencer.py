import pytest

from impaired.exceptions import InvalidWinnerException, SequencerStateException
from impaired.models import Comparison, Item
from impaired.pairing import Comparisons, RetainItemSequencer, SequencerState
from impaired.scoring import Scores


def _items(count):
    return [Item(f"item-{i}") for i in range(count)]


def _run(sequencer, choose):
    """Drive ``sequencer`` to the end, returning (comparison, winner) pairs."""
    steps = []
    for comparison, tracker in sequencer:
        winner = choose(comparison)
        tracker.winner(winner)
        steps.append((comparison, winner))
    return steps


@pytest.mark.parametrize("count", [2, 3, 4, 5, 7])
def test_retain_sequencer_hands_out_every_comparison_once(count):
    comparisons = Comparisons(_items(count))
    steps = _run(comparisons.retain_item_sequencer(), lambda c: c.left)

    handed_out = [comparison for comparison, _ in steps]
    assert len(handed_out) == len(comparisons)
    assert set(handed_out) == set(comparisons)


def test_exhausted_sequencer_keeps_returning_none():
    sequencer = Comparisons(_items(3)).retain_item_sequencer()
    while sequencer.next_comparison() is not None:
        pass

    assert sequencer.state is SequencerState.EXHAUSTED
    assert sequencer.remaining == 0
    assert sequencer.next_comparison() is None
    assert sequencer.next_comparison() is None


def test_no_items_exhaust_immediately():
    sequencer = Comparisons([]).retain_item_sequencer()
    assert sequencer.state is SequencerState.FRESH
    assert sequencer.next_comparison() is None
    assert sequencer.state is SequencerState.EXHAUSTED


@pytest.mark.parametrize("pick", ["left", "right"])
def test_winner_stays_while_it_has_comparisons(pick):
    sequencer = Comparisons(_items(6)).retain_item_sequencer()

    previous_winner = None
    while True:
        winner_left = (
            sequencer.remaining_for(previous_winner) if previous_winner else 0
        )
        step = sequencer.next_comparison()
        if step is None:
            break
        comparison, _ = step
        if winner_left:
            assert previous_winner in comparison
        previous_winner = getattr(comparison, pick)
        sequencer.report_winner(previous_winner)


def test_three_languages_first_in_order_wins():
    rust, cpp, java = Item("Rust"), Item("C++"), Item("Java")
    comparisons = Comparisons([rust, cpp, java])
    sequencer = comparisons.retain_item_sequencer()
    scores = Scores()

    handed_out = []
    winner = None
    while True:
        winner_left = sequencer.remaining_for(winner) if winner else 0
        step = sequencer.next_comparison()
        if step is None:
            break
        comparison, tracker = step
        if winner_left:
            assert winner in comparison
        winner = min(comparison)
        scores.track_result(tracker.winner(winner))
        handed_out.append(comparison)

    assert set(handed_out) == set(comparisons)
    assert scores.total() == 3
    assert scores.all() == {cpp: 2, java: 1, rust: 0}
    assert sequencer.next_comparison() is None


def test_single_item_gives_nothing_to_compare():
    sequencer = Comparisons([Item("Rust")]).retain_item_sequencer()
    assert sequencer.next_comparison() is None
    assert sequencer.state is SequencerState.EXHAUSTED


def test_five_items_left_always_wins():
    comparisons = Comparisons(_items(5))
    sequencer = comparisons.retain_item_sequencer()
    steps = _run(sequencer, lambda c: c.left)

    assert len(steps) == 10
    assert sequencer.emitted == 10
    assert sequencer.next_comparison() is None


def test_previous_item_carries_over_without_results():
    sequencer = Comparisons(_items(4)).retain_item_sequencer()
    previous = None
    while True:
        anchor_left = (
            sum(sequencer.remaining_for(item) for item in previous)
            if previous
            else 0
        )
        step = sequencer.next_comparison()
        if step is None:
            break
        comparison, _ = step
        if anchor_left:
            assert comparison.shares_item_with(previous)
        previous = comparison


def test_reseeds_when_anchor_has_nothing_left():
    a, b, c, d = Item("a"), Item("b"), Item("c"), Item("d")
    sequencer = RetainItemSequencer([Comparison(a, b), Comparison(c, d)])

    first, tracker = sequencer.next_comparison()
    tracker.winner(first.left)
    second, _ = sequencer.next_comparison()

    assert not first.shares_item_with(second)
    assert {first, second} == {Comparison(a, b), Comparison(c, d)}
    assert sequencer.next_comparison() is None


def test_tracker_is_single_use():
    sequencer = Comparisons(_items(3)).retain_item_sequencer()
    comparison, tracker = sequencer.next_comparison()
    tracker.winner(comparison.left)

    assert tracker.used
    with pytest.raises(SequencerStateException):
        tracker.winner(comparison.right)


def test_stale_tracker_is_rejected():
    sequencer = Comparisons(_items(3)).retain_item_sequencer()
    comparison, stale = sequencer.next_comparison()
    sequencer.next_comparison()

    with pytest.raises(SequencerStateException):
        stale.winner(comparison.left)


def test_report_requires_a_handed_out_comparison():
    sequencer = Comparisons(_items(2)).retain_item_sequencer()
    with pytest.raises(SequencerStateException):
        sequencer.report_winner(Item("item-0"))

    comparison, _ = sequencer.next_comparison()
    sequencer.report_winner(comparison.left)
    assert sequencer.next_comparison() is None
    with pytest.raises(SequencerStateException):
        sequencer.report_winner(comparison.left)


def test_winner_outside_comparison_is_rejected():
    sequencer = Comparisons(_items(3)).retain_item_sequencer()
    comparison, tracker = sequencer.next_comparison()
    outsider = next(item for item in _items(3) if item not in comparison)

    with pytest.raises(InvalidWinnerException):
        tracker.winner(outsider)
    # A rejected winner does not use up the tracker
    assert not tracker.used
    tracker.winner(comparison.right)


def test_report_again_replaces_result():
    rust, cpp, java = Item("Rust"), Item("C++"), Item("Java")
    sequencer = RetainItemSequencer(
        [Comparison(rust, cpp), Comparison(cpp, java), Comparison(rust, java)]
    )
    first, _ = sequencer.next_comparison()
    sequencer.report_winner(first.left)
    result = sequencer.report_winner(first.right)
    assert result.winner == first.right

    second, _ = sequencer.next_comparison()
    assert first.right in second


def test_in_order_sequencer_follows_generation_order():
    comparisons = Comparisons(_items(4))
    sequencer = comparisons.in_order_sequencer()

    handed_out = [comparison for comparison, _ in sequencer]
    assert handed_out == list(comparisons)
    assert sequencer.remaining == 0
    assert sequencer.state is SequencerState.EXHAUSTED

import pytest

from impaired.exceptions import InvalidResultException
from impaired.models import Comparison, ComparisonResult, Item
from impaired.scoring import Scores

RUST, CPP, JAVA, GO = Item("Rust"), Item("C++"), Item("Java"), Item("Go")


def test_track_counts_wins():
    scores = Scores()
    scores.track(RUST, CPP)
    scores.track(RUST, JAVA)
    scores.track(JAVA, CPP)

    assert scores.get(RUST) == 2
    assert scores.get(JAVA) == 1
    assert scores.get(CPP) == 0
    assert scores.total() == 3


def test_untracked_items_are_absent():
    scores = Scores()
    assert scores.get(RUST) is None
    assert len(scores) == 0

    scores.track(RUST, CPP)
    assert GO not in scores
    assert scores.get(GO) is None
    assert scores.all() == {RUST: 1, CPP: 0}


def test_loser_score_is_not_reset():
    scores = Scores()
    scores.track(CPP, JAVA)
    scores.track(RUST, CPP)
    assert scores[CPP] == 1


def test_self_result_is_rejected():
    with pytest.raises(InvalidResultException):
        Scores().track(RUST, RUST)


def test_track_result():
    scores = Scores()
    scores.track_result(ComparisonResult.from_winner(Comparison(RUST, CPP), CPP))
    assert scores.all() == {CPP: 1, RUST: 0}


def test_standings_share_rank_on_ties():
    scores = Scores()
    scores.track(CPP, GO)
    scores.track(RUST, JAVA)

    assert scores.ranked() == [(CPP, 1), (RUST, 1), (GO, 0), (JAVA, 0)]
    assert scores.standings() == [
        (1, CPP, 1),
        (1, RUST, 1),
        (3, GO, 0),
        (3, JAVA, 0),
    ]


def test_repeated_wins_accumulate():
    scores = Scores()
    for _ in range(4):
        scores.track(GO, RUST)
    assert scores.get(GO) == 4
    assert scores.get(RUST) == 0

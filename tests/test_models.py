import json

import pytest

from impaired.constants import CARD_SIMPLE, CARD_TICKET
from impaired.exceptions import (
    InvalidComparisonException,
    InvalidWinnerException,
)
from impaired.models import Comparison, ComparisonResult, Item, ItemCard
from impaired.session import SessionItem


def test_comparison_ignores_item_order():
    rust, cpp = Item("Rust"), Item("C++")
    assert Comparison(rust, cpp) == Comparison(cpp, rust)
    assert hash(Comparison(rust, cpp)) == hash(Comparison(cpp, rust))
    assert len({Comparison(rust, cpp), Comparison(cpp, rust)}) == 1


def test_comparison_with_itself_is_rejected():
    with pytest.raises(InvalidComparisonException):
        Comparison(Item("Rust"), Item("Rust"))


def test_comparison_members():
    rust, cpp, java = Item("Rust"), Item("C++"), Item("Java")
    comparison = Comparison(rust, cpp)

    assert rust in comparison
    assert java not in comparison
    assert comparison.other(rust) == cpp
    assert comparison.other(cpp) == rust
    assert comparison.shares_item_with(Comparison(cpp, java))
    assert not comparison.shares_item_with(Comparison(java, Item("Go")))
    assert str(comparison) == "'Rust' vs. 'C++'"

    with pytest.raises(InvalidWinnerException):
        comparison.other(java)


def test_result_from_winner():
    rust, cpp = Item("Rust"), Item("C++")
    result = ComparisonResult.from_winner(Comparison(rust, cpp), cpp)
    assert result.winner == cpp
    assert result.loser == rust
    assert result.to_dict() == {"winner": "C++", "loser": "Rust"}

    with pytest.raises(InvalidWinnerException):
        ComparisonResult.from_winner(Comparison(rust, cpp), Item("Java"))


def test_plain_text_becomes_simple_card():
    card = ItemCard.from_text("Rust")
    assert card.card_type == CARD_SIMPLE
    assert card.title == "Rust"
    assert card.plain_text() == "Rust"

    # JSON that is not a card object stays plain text
    assert ItemCard.from_text("42").title == "42"
    assert ItemCard.from_text('{"name": "x"}').title == '{"name": "x"}'


def test_ticket_card_from_json():
    text = json.dumps(
        {
            "type": CARD_TICKET,
            "title": "Fix login",
            "subtitle": {"name": "PROJ-12", "href": "https://example.org/PROJ-12"},
            "description": "Users cannot log in",
        }
    )
    card = ItemCard.from_text(text)

    assert card.is_ticket
    assert card.subtitle == "PROJ-12"
    assert card.subtitle_href == "https://example.org/PROJ-12"
    assert card.plain_text() == "Fix login (PROJ-12)"
    assert ItemCard.from_dict(card.to_dict()) == card


def test_unknown_card_type_falls_back_to_simple(caplog):
    card = ItemCard.from_dict({"type": "poster", "title": "Dune"})
    assert card.card_type == CARD_SIMPLE
    assert "Unknown card type" in caplog.text


def test_session_item_handle_is_stable():
    first = SessionItem.from_text("Rust")
    second = SessionItem.from_text("Rust")
    assert first.handle == second.handle
    assert len(first.handle) == 16
    assert first.handle != SessionItem.from_text("C++").handle
    assert first.to_dict() == {"hash": first.handle, "item": "Rust"}

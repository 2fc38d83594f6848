import pytest

from impaired.models import Comparison, Item
from impaired.pairing import Comparisons, build_pairs


def _items(count):
    return [Item(f"item-{i}") for i in range(count)]


@pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 5, 8])
def test_every_pair_once(count):
    items = _items(count)
    comparisons = Comparisons(items)

    assert len(comparisons) == count * (count - 1) // 2
    assert len(set(comparisons)) == len(comparisons)
    for i, left in enumerate(items):
        for right in items[i + 1 :]:
            assert Comparison(left, right) in comparisons


def test_fewer_than_two_items_give_no_comparisons():
    assert len(Comparisons([])) == 0
    assert list(Comparisons([Item("Rust")])) == []


def test_duplicate_items_collapse():
    rust, cpp = Item("Rust"), Item("C++")
    comparisons = Comparisons([rust, rust, cpp])

    assert len(comparisons) == 1
    assert comparisons == {Comparison(rust, cpp)}


def test_equality_ignores_input_order():
    rust, cpp, java = Item("Rust"), Item("C++"), Item("Java")
    assert Comparisons([rust, cpp, java]) == Comparisons([java, rust, cpp])
    assert build_pairs([rust, cpp, java]) == {
        Comparison(rust, cpp),
        Comparison(rust, java),
        Comparison(cpp, java),
    }

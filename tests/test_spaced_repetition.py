"""Tests for due selection and the answer transition."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from classes import MASTERY_THRESHOLD, REVIEW_INTERVAL, Card
from spaced_repetition import due_cards, is_due, update_card

T0 = 1_700_000_000


def _card(count=0, last=T0, front="dog", back="perro"):
    return Card(front=front, back=back, correct_count=count, last_review=last)


def test_unmastered_card_is_due():
    assert is_due(_card(count=0), T0 + 1)
    assert is_due(_card(count=MASTERY_THRESHOLD - 1), T0)


def test_mastered_card_not_due_within_interval():
    card = _card(count=MASTERY_THRESHOLD)
    assert not is_due(card, T0)
    assert not is_due(card, T0 + REVIEW_INTERVAL - 1)


def test_mastered_card_due_after_interval():
    card = _card(count=10)
    assert is_due(card, T0 + REVIEW_INTERVAL)
    assert is_due(card, T0 + REVIEW_INTERVAL + 5000)


def test_due_cards_keeps_order():
    cards = [
        _card(front="a", count=0),
        _card(front="b", count=3),
        _card(front="c", count=1),
    ]
    assert [c.front for c in due_cards(cards, T0 + 10)] == ["a", "c"]


def test_correct_answer_increments_and_stamps():
    card = update_card(_card(count=2), True, T0 + 50)
    assert card.correct_count == 3
    assert card.last_review == T0 + 50


def test_incorrect_answer_decrements_not_resets():
    card = update_card(_card(count=5), False, T0 + 50)
    assert card.correct_count == 4
    assert card.last_review == T0 + 50


def test_incorrect_answer_floors_at_zero():
    card = _card(count=1)
    for i, correct in enumerate([False, False, False, True, False, False]):
        card = update_card(card, correct, T0 + i)
        assert card.correct_count >= 0
        assert card.last_review == T0 + i
    assert card.correct_count == 0


def test_update_does_not_mutate_original():
    original = _card(count=1)
    update_card(original, True, T0 + 1)
    assert original.correct_count == 1
    assert original.last_review == T0

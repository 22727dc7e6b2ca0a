# Fixed-threshold scheduling: a card is due until it has been answered
# correctly MASTERY_THRESHOLD times, and again once REVIEW_INTERVAL has passed
# since its last review.

from classes import MASTERY_THRESHOLD, REVIEW_INTERVAL, Card


def is_due(card: Card, now: int) -> bool:
    return card.correct_count < MASTERY_THRESHOLD or now - card.last_review >= REVIEW_INTERVAL


def due_cards(cards: list[Card], now: int) -> list[Card]:
    return [card for card in cards if is_due(card, now)]


def update_card(card: Card, correct: bool, now: int) -> Card:
    if correct:
        correct_count = card.correct_count + 1
    else:
        correct_count = max(0, card.correct_count - 1)
    return card.model_copy(update=dict(correct_count=correct_count, last_review=now))

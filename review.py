import logging
import random
from typing import Callable

from cards import CardStore, Clock, current_time
from classes import SessionResult
import spaced_repetition

logger = logging.getLogger("flashcards.review")

Ask = Callable[[str], str]
Show = Callable[[str], None]


def run_session(
    store: CardStore,
    ask: Ask = input,
    show: Show = print,
    clock: Clock = current_time,
    rng: random.Random | None = None,
    save_each_answer: bool = False,
) -> SessionResult | None:
    """Drill every due card once, in random order.

    Due cards are picked from a snapshot taken when the session starts.
    Answers are applied to the store as they come in and the store is saved
    once at the end, or after each answer when `save_each_answer` is set.
    Returns None when there was nothing to review.
    """
    cards = store.all_cards()
    if not cards:
        show("No flashcards available. Add some first!")
        return None

    now = clock()
    due = spaced_repetition.due_cards(cards, now)
    if not due:
        show("No cards due for review!")
        return None

    (rng or random).shuffle(due)
    logger.info("Starting review of %d due cards out of %d", len(due), len(cards))

    num_correct = 0
    for card in due:
        show(f"Front: {card.front}")
        answer = ask("Enter answer: ")
        correct = answer == card.back
        if correct:
            num_correct += 1
            show("Correct!")
        else:
            show(f"Incorrect. Answer: {card.back}")
        store.apply_result(card.front, correct)
        if save_each_answer:
            store.save()

    if not save_each_answer:
        store.save()

    result = SessionResult(reviewed=len(due), correct=num_correct)
    show(f"Session complete: {result.correct}/{result.reviewed} correct.")
    logger.info("Finished review: %d/%d correct", result.correct, result.reviewed)
    return result

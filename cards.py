import contextlib
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Callable

from classes import Card
import spaced_repetition

logger = logging.getLogger("flashcards.store")

Clock = Callable[[], int]


class StoreError(Exception):
    pass


def current_time() -> int:
    return int(time.time())


def read_cards(path: Path) -> list[Card]:
    """Parse the flashcards file.

    Each card is three lines: front, back, then "<correct_count> <last_review>".
    A missing or unreadable file is an empty deck. Parsing stops at the first
    truncated, undecodable or malformed record, which is dropped along with
    anything after it.
    """
    if not path.is_file():
        logger.info("No flashcards file at %s, starting empty", path)
        return []

    try:
        lines = path.read_bytes().split(b"\n")
    except OSError as e:
        logger.warning("Could not read %s, starting empty: %s", path, e)
        return []

    cards: list[Card] = []
    for i in range(0, len(lines), 3):
        record = lines[i : i + 3]
        if len(record) < 3:
            if any(record):
                logger.warning("Dropping truncated record at line %d of %s", i + 1, path)
            break
        try:
            front, back, counts = (line.rstrip(b"\r").decode("utf-8") for line in record)
            correct_count, last_review = counts.split()
            card = Card(
                front=front,
                back=back,
                correct_count=int(correct_count),
                last_review=int(last_review),
            )
        except ValueError:
            # UnicodeDecodeError and pydantic's ValidationError are both ValueErrors.
            logger.warning("Dropping malformed record at line %d of %s", i + 1, path)
            break
        cards.append(card)
    logger.info("Loaded %d cards from %s", len(cards), path)
    return cards


def write_cards(path: Path, cards: list[Card]) -> None:
    # Write next to the deck and swap it in, so a failed write leaves the old file.
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for card in cards:
                f.write(f"{card.front}\n{card.back}\n{card.correct_count} {card.last_review}\n")
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise


class CardStore:
    """Sole owner of the deck and its file.

    Use as a context manager to load on entry and save on a clean exit.
    """

    def __init__(self, path: Path, clock: Clock = current_time):
        self.path = Path(path)
        self.clock = clock
        self._cards: list[Card] = []

    def __enter__(self) -> "CardStore":
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.save()

    def load(self) -> None:
        self._cards = read_cards(self.path)

    def save(self) -> None:
        try:
            write_cards(self.path, self._cards)
        except OSError as e:
            raise StoreError(f"could not write {self.path}: {e}") from e
        logger.debug("Saved %d cards to %s", len(self._cards), self.path)

    def add_card(self, front: str, back: str) -> Card:
        card = Card(front=front, back=back, correct_count=0, last_review=self.clock())
        self._cards.append(card)
        try:
            self.save()
        except StoreError:
            self._cards.pop()
            raise
        return card.model_copy()

    def apply_result(self, front: str, correct: bool) -> int:
        """Apply an answer to every card with this front. Returns the number updated."""
        now = self.clock()
        updated = 0
        for i, card in enumerate(self._cards):
            if card.front == front:
                self._cards[i] = spaced_repetition.update_card(card, correct, now)
                updated += 1
        return updated

    def all_cards(self) -> list[Card]:
        return [card.model_copy() for card in self._cards]

    def __len__(self) -> int:
        return len(self._cards)

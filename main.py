import logging
import sys
from typing import Optional

from pydantic import ValidationError

from cards import CardStore, Clock, StoreError, current_time
from config import Settings
from review import Ask, Show, run_session
from stats import compute_stats, format_stats

MENU = """
LinguaCards Menu:
1. Add flashcard
2. Review flashcards
3. Show stats
4. Exit"""


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings(store_path=argv[0] if argv else None)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    return run(settings)


def run(
    settings: Settings,
    ask: Ask = input,
    show: Show = print,
    clock: Clock = current_time,
) -> int:
    try:
        with CardStore(settings.store_path, clock=clock) as store:
            _menu_loop(store, settings, ask, show, clock)
    except StoreError as e:
        # Raised by the final save when the store is closed.
        show(f"Could not save flashcards: {e}")
        return 1
    return 0


def _menu_loop(store: CardStore, settings: Settings, ask: Ask, show: Show, clock: Clock) -> None:
    while True:
        show(MENU)
        try:
            choice = ask("Choose an option: ")
        except EOFError:
            choice = "4"

        try:
            if choice == "1":
                _add_card(store, ask, show)
            elif choice == "2":
                run_session(
                    store,
                    ask=ask,
                    show=show,
                    clock=clock,
                    save_each_answer=settings.save_each_answer,
                )
            elif choice == "3":
                show(format_stats(compute_stats(store.all_cards(), clock())))
            elif choice == "4":
                return
            else:
                show("Invalid option. Try again.")
        except StoreError as e:
            show(f"Could not save flashcards: {e}")
        except EOFError:
            return


def _add_card(store: CardStore, ask: Ask, show: Show) -> None:
    front = ask("Enter front (word): ")
    back = ask("Enter back (translation): ")
    try:
        store.add_card(front, back)
    except ValidationError as e:
        show(f"Invalid card: {e.errors()[0]['msg']}")
        return
    show("Card added!")


if __name__ == "__main__":
    sys.exit(main())

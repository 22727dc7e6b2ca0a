"""Runtime configuration for the flashcards app."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Where the deck lives and how the app behaves.

    Unset fields fall back to environment variables, then to defaults.
    """
    store_path: Optional[Path] = None
    save_each_answer: Optional[bool] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.store_path is None:
            self.store_path = os.environ.get("FLASHCARDS_FILE", "flashcards.txt")
        self.store_path = Path(self.store_path)

        if self.save_each_answer is None:
            env_save = os.environ.get("FLASHCARDS_SAVE_EACH_ANSWER", "")
            self.save_each_answer = env_save.strip().lower() in TRUE_VALUES

        if self.log_level is None:
            self.log_level = os.environ.get("FLASHCARDS_LOG_LEVEL", "WARNING")
        self.log_level = self.log_level.upper()

from pydantic import BaseModel, Field, field_validator

MASTERY_THRESHOLD = 3
REVIEW_INTERVAL = 86400  # One day, in seconds.


class Card(BaseModel):
    front: str
    back: str
    correct_count: int = Field(default=0, ge=0)
    last_review: int

    @field_validator("front", "back")
    @classmethod
    def _single_line(cls, value: str) -> str:
        # Each side occupies exactly one line of the flashcards file.
        if "\n" in value or "\r" in value:
            raise ValueError("card text must fit on a single line")
        return value

    def is_mastered(self) -> bool:
        return self.correct_count >= MASTERY_THRESHOLD


class SessionResult(BaseModel):
    reviewed: int
    correct: int


class Stats(BaseModel):
    total: int
    mastered: int
    mastery_percent: int
    due: int
    by_correct_count: dict[int, int]

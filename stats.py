import pandas as pd

from classes import Card, Stats
import spaced_repetition


def compute_stats(cards: list[Card], now: int) -> Stats | None:
    if not cards:
        return None

    df = pd.DataFrame(
        [
            dict(
                front=card.front,
                correct_count=card.correct_count,
                mastered=card.is_mastered(),
                due=spaced_repetition.is_due(card, now),
            )
            for card in cards
        ]
    )
    total = len(df)
    mastered = int(df["mastered"].sum())
    by_correct_count = df.groupby("correct_count").size()
    return Stats(
        total=total,
        mastered=mastered,
        mastery_percent=mastered * 100 // total,
        due=int(df["due"].sum()),
        by_correct_count={int(k): int(v) for k, v in by_correct_count.items()},
    )


def format_stats(stats: Stats | None) -> str:
    if stats is None:
        return "No cards available."
    lines = [
        f"Total cards: {stats.total}",
        f"Mastered cards: {stats.mastered} ({stats.mastery_percent}%)",
        f"Due now: {stats.due}",
    ]
    for correct_count, n in stats.by_correct_count.items():
        lines.append(f"  {correct_count} correct: {n}")
    return "\n".join(lines)

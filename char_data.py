from typing import List

import numpy as np


class CharFrequency:
    """Statistics for one character observed after a specific window."""

    def __init__(self, character: str, count: int = 0):
        self.character = character
        self.count = count
        # Set by calculate_probabilities once training is done
        self.probability = 0.0
        self.cumulative_probability = 0.0

    def increment(self) -> None:
        self.count += 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, CharFrequency):
            return NotImplemented
        return (self.character == other.character
                and self.count == other.count
                and self.probability == other.probability
                and self.cumulative_probability == other.cumulative_probability)

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"

    def __repr__(self) -> str:
        return (f"CharFrequency({self.character!r}, count={self.count}, "
                f"p={self.probability}, cp={self.cumulative_probability})")


def calculate_probabilities(entries: List[CharFrequency]) -> None:
    """Set probability and cumulative probability of every entry from its count.

    Entries keep their order; the running sum follows that order, so the last
    entry ends up at 1.0 up to rounding. Only the counts are read, so calling
    this again on the same list gives the same values.
    """
    if not entries:
        return

    counts = np.array([entry.count for entry in entries], dtype=np.int64)
    total = counts.sum()
    probs = counts / total
    cumulative = np.cumsum(probs)

    for entry, p, cp in zip(entries, probs, cumulative):
        entry.probability = float(p)
        entry.cumulative_probability = float(cp)

from typing import List, Protocol

from char_data import CharFrequency


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1), e.g. numpy.random.Generator or random.Random."""

    def random(self) -> float:
        ...


def sample(entries: List[CharFrequency], random_draw: float) -> str:
    """Pick the first character whose cumulative probability exceeds `random_draw`."""
    if not entries:
        raise ValueError("Cannot sample from an empty distribution")

    for entry in entries:
        if entry.cumulative_probability > random_draw:
            return entry.character

    # Rounding can leave the last cumulative probability just under the draw
    return entries[-1].character

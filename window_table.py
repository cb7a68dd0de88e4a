from typing import Dict, Iterator, List, Optional, Tuple

from char_data import CharFrequency, calculate_probabilities


class WindowTable:
    """Maps each window to its successor characters in first-seen order."""

    def __init__(self):
        # Plain dicts keep insertion order, for windows and for their successors
        self._table: Dict[str, Dict[str, CharFrequency]] = {}

    def update(self, window: str, character: str) -> None:
        """Record that `character` followed `window` once more."""
        successors = self._table.get(window)
        if successors is None:
            successors = {}
            self._table[window] = successors

        entry = successors.get(character)
        if entry is None:
            successors[character] = CharFrequency(character, 1)
        else:
            entry.increment()

    def get(self, window: str) -> Optional[List[CharFrequency]]:
        successors = self._table.get(window)
        if successors is None:
            return None
        return list(successors.values())

    def windows(self) -> Iterator[str]:
        return iter(self._table)

    def items(self) -> Iterator[Tuple[str, List[CharFrequency]]]:
        for window, successors in self._table.items():
            yield window, list(successors.values())

    def finalize(self) -> None:
        """Turn the counts of every window into (cumulative) probabilities."""
        for _, entries in self.items():
            calculate_probabilities(entries)

    def __contains__(self, window: str) -> bool:
        return window in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __str__(self) -> str:
        lines = []
        for window, entries in self.items():
            listing = " ".join(str(entry) for entry in entries)
            lines.append(f"{window} : ({listing})")
        return "\n".join(lines) + ("\n" if lines else "")

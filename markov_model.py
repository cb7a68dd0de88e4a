from typing import List, Optional

from char_data import CharFrequency
from window_table import WindowTable


class MarkovModel:
    """A trained window -> successor distribution mapping plus its window length.

    Filled once by trainer.train() and only read afterwards.
    """

    def __init__(self, window_length: int, table: Optional[WindowTable] = None):
        self.window_length = window_length
        self.table = table if table is not None else WindowTable()

    def lookup(self, window: str) -> Optional[List[CharFrequency]]:
        return self.table.get(window)

    def is_empty(self) -> bool:
        return len(self.table) == 0

    def __contains__(self, window: str) -> bool:
        return window in self.table

    def __len__(self) -> int:
        return len(self.table)

    def __str__(self) -> str:
        return str(self.table)

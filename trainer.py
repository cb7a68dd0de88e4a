import logging
from collections import deque
from typing import Iterable

from tqdm import tqdm

from char_data import calculate_probabilities
from markov_model import MarkovModel

logger = logging.getLogger(__name__)

__all__ = ["train", "calculate_probabilities"]


def train(corpus: Iterable[str], window_length: int, progress: bool = False) -> MarkovModel:
    """Build a model from a corpus by sliding a window of `window_length` characters over it.

    A non-positive window length, or a corpus shorter than the window, gives an
    empty model instead of an error.
    """
    model = MarkovModel(window_length)
    if window_length <= 0:
        logger.warning(f"Window length {window_length} is not positive, skipping training")
        return model

    total = len(corpus) if hasattr(corpus, "__len__") else None
    chars = iter(tqdm(corpus, total=total, desc="Training", unit="char", disable=not progress))

    window = deque(maxlen=window_length)
    for c in chars:
        window.append(c)
        if len(window) == window_length:
            break

    if len(window) < window_length:
        logger.info(f"Corpus shorter than window length {window_length}, model left empty")
        return model

    events = 0
    for c in chars:
        model.table.update("".join(window), c)
        # maxlen drops the oldest character
        window.append(c)
        events += 1

    model.table.finalize()
    logger.info(f"Trained on {events} transitions, {len(model)} distinct windows")
    return model

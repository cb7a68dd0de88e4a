import logging

from markov_model import MarkovModel
from sampler import RandomSource, sample

logger = logging.getLogger(__name__)


def generate(model: MarkovModel, seed_text: str, target_length: int,
             random_source: RandomSource) -> str:
    """Extend `seed_text` one sampled character at a time up to `target_length`.

    Stops early, returning what it has, as soon as the trailing window was never
    seen during training. The seed comes back unchanged if it is None, already
    long enough, or shorter than the model's window.
    """
    window_length = model.window_length
    if seed_text is None or target_length <= len(seed_text) or len(seed_text) < window_length:
        return seed_text

    generated = list(seed_text)
    window = seed_text[len(seed_text) - window_length:]

    while len(generated) < target_length:
        entries = model.lookup(window)
        if entries is None:
            logger.debug(f"Unseen window {window!r}, stopping at {len(generated)} characters")
            break

        next_char = sample(entries, random_source.random())
        generated.append(next_char)
        window = "".join(generated[len(generated) - window_length:])

    return "".join(generated)

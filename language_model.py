"""
Character-level language model
------------------------------
Learns which character tends to follow every window of `window_length`
characters in a corpus, then extends a seed text by sampling from those
frequencies.

    char-markov 3 "The" 200 fixed corpus.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from generator import generate
from markov_model import MarkovModel
from trainer import train

DEFAULT_SEED = 20  # used for "fixed" runs so output can be reproduced
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def load_corpus(filename: Union[str, Path]) -> Optional[str]:
    """Read a UTF-8 corpus file, or return None if it can't be read."""
    try:
        text = Path(filename).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error loading corpus {filename}: {e}")
        return None
    logger.info(f"Loaded corpus {filename} ({len(text)} characters)")
    return text


class LanguageModel:
    def __init__(self, window_length: int, seed: Optional[int] = None):
        self.window_length = window_length
        self.seed = seed
        # Without a seed every instance draws fresh entropy
        self.random_source = np.random.default_rng(seed)
        self.model = MarkovModel(window_length)

    def train(self, corpus: str, progress: bool = False) -> None:
        """Train on an in-memory corpus, replacing any previous model."""
        self.model = train(corpus, self.window_length, progress=progress)

    def train_file(self, filename: Union[str, Path], progress: bool = False) -> bool:
        corpus = load_corpus(filename)
        if corpus is None:
            return False
        self.train(corpus, progress=progress)
        return True

    def generate(self, initial_text: str, text_length: int) -> str:
        return generate(self.model, initial_text, text_length, self.random_source)

    def __str__(self) -> str:
        return str(self.model)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Train a character-level Markov model on a text file and generate text from it')
    parser.add_argument('window_length', type=int, help='Number of characters used as context')
    parser.add_argument('initial_text', help='Seed text, at least window_length characters long')
    parser.add_argument('text_length', type=int, help='Total length of the generated text')
    parser.add_argument('mode', choices=['random', 'fixed'],
                        help=f'"fixed" uses seed {DEFAULT_SEED} for reproducible output')
    parser.add_argument('file_name', help='Training corpus (UTF-8 text)')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar while training')
    parser.add_argument('--dump', action='store_true', help='Print the trained model before the text')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT
    )

    seed = None if args.mode == 'random' else DEFAULT_SEED
    lm = LanguageModel(args.window_length, seed=seed)
    if not lm.train_file(args.file_name, progress=args.progress):
        print(f"Failed to load corpus: {args.file_name}", file=sys.stderr)
        return 1

    if args.dump:
        print(lm, end='')

    print(lm.generate(args.initial_text, args.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())

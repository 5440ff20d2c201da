"""
Character-level BPE (Byte Pair Encoding) training.

Every word of the training text starts as its characters followed by an
end-of-word marker. Each iteration counts all adjacent symbol pairs, picks the
most frequent one and fuses it into a new symbol everywhere it occurs.

Time complexity analysis
------------------------

Let K be the number of merges and L the total number of symbols over all
distinct words.

- Counting pairs is one scan over every word: O(L).
- Merging touches only the words that contain the selected pair, and each
  fused occurrence costs O(len(word)) for the list splice.
- So the total is O(KL). Updating pair counts incrementally after each merge
  (instead of a full rescan) would bring this down, but the full rescan keeps
  the statistics trivially consistent with the corpus.

Tie-breaking
------------

Pairs are discovered scanning words in first-seen order and symbols left to
right. When two pairs have the same frequency, the one discovered first wins,
so training is reproducible.
"""

import os

from . import logger
from .corpus import Corpus, Vocabulary
from .pretokenization import EOW, segment
from .tokenizer import Tokenizer


class PairData:
    """
    Statistics for one pair key (the two symbols concatenated).

    [positions] maps word_id -> start indices, in increasing order, of every
    occurrence in that word. An occurrence at `start` covers the symbols at
    `start` and `start + 1`.
    """

    def __init__(self, pair: tuple[str, str]):
        # First (left, right) split seen for this key. Different splits of the
        # same string (e.g. "a" + "bc" and "ab" + "c") share one key.
        self.pair = pair
        self.frequency = 0
        self.positions: dict[int, list[int]] = {}

    def add_occurrence(self, word_id: int, start: int, count: int):
        self.frequency += count
        self.positions.setdefault(word_id, []).append(start)

    def __repr__(self):
        return (
            f"PairData(pair={self.pair!r}, frequency={self.frequency}, "
            f"positions={self.positions!r})"
        )


def count_pairs(corpus: Corpus) -> dict[str, PairData]:
    """
    Count every adjacent symbol pair in [corpus], weighted by word count.
    Overlapping occurrences (e.g. both pairs of `a a a`) are all counted.
    """
    pair_stats: dict[str, PairData] = {}

    for word_id in corpus:
        count = corpus.count(word_id)
        symbols = corpus.symbols(word_id)

        for start, (first, second) in enumerate(zip(symbols[:-1], symbols[1:])):
            key = first + second
            pair_data = pair_stats.get(key)
            if pair_data is None:
                pair_data = PairData((first, second))
                pair_stats[key] = pair_data
            pair_data.add_occurrence(word_id, start, count)

    return pair_stats


def select_pair_to_merge(pair_stats: dict[str, PairData]) -> str | None:
    """
    Return the key with the strictly greatest frequency, or None if there are
    no pairs. Ties go to the key discovered first.
    """
    selected_key = None
    max_frequency = 0
    for key, pair_data in pair_stats.items():
        if pair_data.frequency > max_frequency:
            selected_key = key
            max_frequency = pair_data.frequency

    return selected_key


def merge_pair(corpus: Corpus, pair_data: PairData):
    """
    Fuse every recorded occurrence of [pair_data] into one symbol, updating
    [corpus] in place.
    """
    for word_id, starts in pair_data.positions.items():
        symbols = list(corpus.symbols(word_id))

        # Iterate from left to right. Each fuse shifts later symbols one to
        # the left, so adjust recorded starts by the number of fuses so far.
        # For a word 'a a a', merging 'aa' gives 'aa a': the second occurrence
        # lost its left symbol to the first one and is skipped.
        merged = 0
        consumed = -1
        for start in starts:
            if start <= consumed:
                continue

            position = start - merged
            symbols[position] = symbols[position] + symbols[position + 1]
            symbols.pop(position + 1)

            merged += 1
            consumed = start + 1

        corpus.replace(word_id, symbols)


class BPETrainer:
    """
    Owns the corpus and vocabulary of one training session.

    `train` can be called more than once: later text is added to the same
    corpus and merging continues from the current state.
    """

    def __init__(self, end_of_word: str = EOW):
        self.end_of_word = end_of_word
        self.corpus = Corpus()
        self.vocab = Vocabulary()

        # Merges in order of creation, as the (left, right) split first seen.
        self.merges: list[tuple[str, str]] = []

    def train(self, text: str, k: int) -> Vocabulary:
        """
        Learn up to [k] merges from [text]. Stops early when no pair is left.
        Returns the trainer's vocabulary, which later calls keep growing.
        """
        segment(text, self.corpus, self.vocab, self.end_of_word)
        logger.info(
            f"Finished segmentation! {self.corpus.total()} words, "
            f"{len(self.corpus)} distinct"
        )

        for _ in range(k):
            logger.info(f"vocab len: {len(self.vocab)}")

            pair_stats = count_pairs(self.corpus)
            selected_key = select_pair_to_merge(pair_stats)
            if selected_key is None:
                logger.info("No pair left to merge")
                break

            pair_data = pair_stats[selected_key]
            logger.info(f"Selected pair: {pair_data.pair}")

            self.vocab.add(selected_key)
            self.merges.append(pair_data.pair)
            merge_pair(self.corpus, pair_data)

        logger.info("Finished training BPE tokenizer!")
        return self.vocab

    def tokenizer(self) -> Tokenizer:
        return Tokenizer(self.vocab)

    def tokenize(self, text: str) -> list[str]:
        return self.tokenizer().tokenize(text)


def train_bpe(text: str, num_merges: int, end_of_word: str = EOW) -> BPETrainer:
    trainer = BPETrainer(end_of_word=end_of_word)
    trainer.train(text, num_merges)
    return trainer


def train_bpe_from_file(
    input_path: str | os.PathLike, num_merges: int, end_of_word: str = EOW
) -> BPETrainer:
    """Train on the whole contents of a UTF-8 text file."""
    logger.info(f"Reading corpus from {input_path}")
    with open(input_path, encoding="utf-8") as f:
        text = f.read()

    return train_bpe(text, num_merges, end_of_word=end_of_word)

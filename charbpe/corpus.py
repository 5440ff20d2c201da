from typing import Iterator


class Vocabulary:
    """
    Insertion-ordered set of symbols. Only grows: symbols are appended in the
    order they are first seen and never removed.
    """

    def __init__(self, symbols=None):
        # dict keeps insertion order; values are unused.
        self._symbols: dict[str, None] = {}
        if symbols is not None:
            for symbol in symbols:
                self.add(symbol)

    def add(self, symbol: str) -> bool:
        """Add [symbol]. Returns False if it was already present."""
        if symbol in self._symbols:
            return False
        self._symbols[symbol] = None
        return True

    def index(self, symbol: str) -> int:
        return self.as_list().index(symbol)

    def as_list(self) -> list[str]:
        return list(self._symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self._symbols

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __eq__(self, other):
        if not isinstance(other, Vocabulary):
            return NotImplemented
        return self.as_list() == other.as_list()

    def __repr__(self):
        return f"Vocabulary({self.as_list()!r})"


class Corpus:
    """
    Distinct words of the training text, each with its current symbols and
    its number of occurrences.

    Words get integer ids in first-seen order, and iteration always follows
    that order, so training over the same text is reproducible.
    """

    def __init__(self):
        # word -> word_id
        self.word_ids: dict[str, int] = {}

        # word_id -> current symbols
        self.word_symbols: dict[int, list[str]] = {}

        # word_id -> number of occurrences
        self.word_counts: dict[int, int] = {}

    def add_word(self, word: str, symbols: list[str]) -> int:
        """
        Count one occurrence of [word]. [symbols] is its initial segmentation
        and is only used the first time the word is seen.
        """
        word_id = self.word_ids.get(word)
        if word_id is None:
            word_id = len(self.word_ids)
            self.word_ids[word] = word_id
            self.word_symbols[word_id] = list(symbols)
            self.word_counts[word_id] = 0

        self.word_counts[word_id] += 1
        return word_id

    def symbols(self, word_id: int) -> list[str]:
        return self.word_symbols[word_id]

    def count(self, word_id: int) -> int:
        return self.word_counts[word_id]

    def replace(self, word_id: int, symbols: list[str]):
        """Swap in the post-merge segmentation of a word. Count is kept."""
        self.word_symbols[word_id] = symbols

    def representation(self, word_id: int) -> str:
        return " ".join(self.word_symbols[word_id])

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield (representation, count) in first-seen order."""
        for word_id, count in self.word_counts.items():
            yield self.representation(word_id), count

    def total(self) -> int:
        return sum(self.word_counts.values())

    def __iter__(self) -> Iterator[int]:
        return iter(self.word_counts)

    def __len__(self) -> int:
        return len(self.word_counts)

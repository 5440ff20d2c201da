from dataclasses import dataclass
from typing import Iterable, Iterator

from . import logger
from .corpus import Vocabulary

UNKNOWN_ID = -1


class NotTrainedError(Exception):
    """Raised when segmenting with an empty vocabulary."""

    def __init__(self, message="vocabulary is empty, train before tokenizing"):
        super().__init__(message)


@dataclass(frozen=True)
class Segmentation:
    """
    Result of `Tokenizer.segment`. Exactly one of [tokens] and [error] is set.
    """

    tokens: list[str] | None = None
    error: NotTrainedError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[str]:
        if self.error is not None:
            raise self.error
        return self.tokens


def greedy_segment(text: str, vocab: Vocabulary) -> list[str]:
    """
    Split [text] into the longest prefixes found in [vocab], scanning left
    to right.

    The buffer grows one character at a time. Once it stops being a
    vocabulary symbol, everything but its last character is emitted and the
    buffer restarts from that character. Whatever is left at the end is
    emitted even if it is not in [vocab], so `"".join(tokens) == text`.
    """
    tokens: list[str] = []
    buffer = ""
    for char in text:
        buffer += char
        if buffer in vocab:
            continue

        # A lone unknown character has nothing before it to emit.
        if len(buffer) > 1:
            tokens.append(buffer[:-1])
        buffer = char

    if buffer:
        tokens.append(buffer)

    return tokens


class Tokenizer:
    def __init__(self, vocab: Vocabulary):
        """
        Args:
            vocab (Vocabulary): Learned symbols. Read on every call, so a
                vocabulary shared with a trainer stays up to date.

        Note that segmentation works on raw text: it knows nothing about
        whitespace word boundaries or the end-of-word marker used during
        training. Whitespace is never a vocabulary symbol, so it always comes
        out as tokens of its own.
        """
        self.vocab = vocab

    def segment(self, text: str) -> Segmentation:
        if len(self.vocab) == 0:
            return Segmentation(error=NotTrainedError())

        tokens = greedy_segment(text, self.vocab)
        logger.debug(f"Segmented {len(text)} characters into {len(tokens)} tokens")
        return Segmentation(tokens=tokens)

    def tokenize(self, text: str) -> list[str]:
        return self.segment(text).unwrap()

    def tokenize_iterable(self, iterable: Iterable[str]) -> Iterator[str]:
        """
        Given an iterable of strings (e.g. lines of a file), lazily yield the
        tokens of each string in turn. Tokens never span two strings.
        """
        if len(self.vocab) == 0:
            raise NotTrainedError()

        for s in iterable:
            for token in self.tokenize(s):
                yield token

    def encode(self, text: str) -> list[int]:
        """
        Tokenize [text] and map every token to its position in the
        vocabulary. Tokens outside the vocabulary map to UNKNOWN_ID.
        """
        tokens = self.tokenize(text)
        symbol_ids = {symbol: id for id, symbol in enumerate(self.vocab)}
        return [symbol_ids.get(token, UNKNOWN_ID) for token in tokens]

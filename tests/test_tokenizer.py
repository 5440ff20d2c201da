import pytest

from charbpe.bpe import BPETrainer, train_bpe
from charbpe.corpus import Vocabulary
from charbpe.tokenizer import (
    UNKNOWN_ID,
    NotTrainedError,
    Segmentation,
    Tokenizer,
    greedy_segment,
)

from .common import EXAMPLE_TEXT, FIXTURES_PATH


def test_greedy_segment_longest_prefix():
    vocab = Vocabulary(["a", "b", "ab"])
    assert greedy_segment("abba", vocab) == ["ab", "b", "b", "a"]


def test_greedy_segment_unknown_characters():
    vocab = Vocabulary(["a"])
    assert greedy_segment("xay", vocab) == ["x", "a", "y"]
    assert greedy_segment("xx", vocab) == ["x", "x"]


def test_greedy_segment_keeps_unrecognized_tail():
    vocab = Vocabulary(["l", "o", "lo"])
    assert greedy_segment("lo", vocab) == ["lo"]
    assert greedy_segment("loz", vocab) == ["lo", "z"]


def test_greedy_segment_empty_text():
    assert greedy_segment("", Vocabulary(["a"])) == []


def test_tokenize_before_training_raises():
    tokenizer = Tokenizer(Vocabulary())
    with pytest.raises(NotTrainedError):
        tokenizer.tokenize("low")

    with pytest.raises(NotTrainedError):
        BPETrainer().tokenize("low")


def test_segment_before_training_returns_failure():
    result = Tokenizer(Vocabulary()).segment("low")

    assert not result.ok
    assert result.tokens is None
    assert isinstance(result.error, NotTrainedError)
    with pytest.raises(NotTrainedError):
        result.unwrap()


def test_segment_after_training_returns_tokens():
    trainer = train_bpe("low low", 3)
    result = trainer.tokenizer().segment("low")

    assert result == Segmentation(tokens=["low"])
    assert result.ok
    assert result.unwrap() == ["low"]


def test_training_on_empty_text_is_not_trained():
    trainer = train_bpe("", 5)
    with pytest.raises(NotTrainedError):
        trainer.tokenize("anything")


def test_tokenizer_sees_vocabulary_updates():
    trainer = BPETrainer()
    tokenizer = trainer.tokenizer()
    assert not tokenizer.segment("low").ok

    trainer.train("low low low", 0)
    assert tokenizer.tokenize("low") == ["l", "o", "w"]

    trainer.train("", 2)
    assert tokenizer.tokenize("low") == ["low"]


@pytest.mark.parametrize(
    "text",
    [
        "lower widest",
        "newest",
        "  spaced   out\ttext\n",
        "unseen characters: 123 ?!",
        "",
    ],
)
def test_tokenize_reconstructs_text(text):
    trainer = train_bpe(EXAMPLE_TEXT, 20)
    tokens = trainer.tokenize(text)

    assert "".join(tokens) == text
    assert all(token != "" for token in tokens)


def test_tokenize_does_not_know_word_boundaries():
    trainer = train_bpe("ab ab ab", 1)

    # Whitespace is never in the vocabulary, and the marker is just text.
    assert trainer.tokenize("ab ab") == ["ab", " ", "ab"]
    assert trainer.tokenize("ab_") == ["ab", "_"]


def test_tokenize_iterable():
    trainer = train_bpe(EXAMPLE_TEXT, 10)
    tokenizer = trainer.tokenizer()

    with open(FIXTURES_PATH / "corpus.txt", encoding="utf-8") as f:
        lines = f.readlines()
        tokens = list(tokenizer.tokenize_iterable(lines))

    assert "".join(tokens) == "".join(lines)


def test_tokenize_iterable_before_training_raises():
    with pytest.raises(NotTrainedError):
        list(Tokenizer(Vocabulary()).tokenize_iterable(["low"]))


def test_encode_uses_vocabulary_positions():
    tokenizer = Tokenizer(Vocabulary(["a", "b", "ab"]))
    assert tokenizer.encode("abx") == [2, UNKNOWN_ID]
    assert tokenizer.encode("ba") == [1, 0]

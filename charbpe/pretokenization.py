import regex as re

from .corpus import Corpus, Vocabulary

EOW = "_"
WHITESPACE_PAT = r"\s+"


def split_words(text: str) -> list[str]:
    """
    Split [text] into words on runs of whitespace. Leading and trailing
    whitespace is ignored, so empty or blank text gives no words.
    """
    text = text.strip()
    if text == "":
        return []
    return re.split(WHITESPACE_PAT, text)


def word_to_symbols(word: str, end_of_word: str = EOW) -> list[str]:
    return list(word) + [end_of_word]


def segment(
    text: str, corpus: Corpus, vocab: Vocabulary, end_of_word: str = EOW
) -> None:
    """
    Add every word of [text] to [corpus] as single-character symbols followed
    by [end_of_word], registering each symbol in [vocab] as it is seen.
    """
    for word in split_words(text):
        symbols = word_to_symbols(word, end_of_word)
        for symbol in symbols:
            vocab.add(symbol)
        corpus.add_word(word, symbols)

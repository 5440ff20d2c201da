from .bpe import (
    BPETrainer,
    PairData,
    count_pairs,
    merge_pair,
    select_pair_to_merge,
    train_bpe,
    train_bpe_from_file,
)
from .corpus import Corpus, Vocabulary
from .pretokenization import EOW, segment, split_words, word_to_symbols
from .tokenizer import NotTrainedError, Segmentation, Tokenizer, greedy_segment

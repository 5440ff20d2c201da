from .bpe import train_bpe_from_file
import sys
import pathlib

# Run this with
# $ uv run -m charbpe.train_bpe_corpus <corpus> [num_merges]

DEFAULT_NUM_MERGES = 100


def main():
    if len(sys.argv) < 2:
        print("No path provided")
        return

    path = pathlib.Path(sys.argv[1])
    num_merges = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_NUM_MERGES

    print(f"Training BPE using {path}")
    trainer = train_bpe_from_file(path, num_merges)

    for symbol in trainer.vocab:
        print(symbol)


if __name__ == "__main__":
    main()

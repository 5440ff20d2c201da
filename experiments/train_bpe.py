import argparse
import cProfile
import pathlib
import sys

from charbpe.bpe import train_bpe_from_file

# Run this with
# $ uv run -m experiments.train_bpe train --input-file <corpus> --num-merges 100


def command_train(args):
    """Train BPE on a text file and display the learned vocabulary."""
    path = pathlib.Path(args.input_file)
    num_merges = args.num_merges

    print(f"Training BPE using {path}")
    print(f"Number of merges: {num_merges}")
    print(f"End-of-word marker: {args.end_of_word}")

    trainer = train_bpe_from_file(path, num_merges, end_of_word=args.end_of_word)
    vocab = trainer.vocab

    print("vocab: ")
    print(vocab.as_list())
    print("merges")
    print(trainer.merges)
    print(f"Performed {len(trainer.merges)} of {num_merges} merges")

    longest_vocab = max(vocab, key=len) if len(vocab) > 0 else ""
    print(f"Longest vocab: {longest_vocab!r}. Length: {len(longest_vocab)}")

    if args.tokenize is not None:
        tokens = trainer.tokenize(args.tokenize)
        print(f"Tokens: {tokens}")


def main():
    parser = argparse.ArgumentParser(
        description="Character-level BPE training tool",
        prog="python -m experiments.train_bpe",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Train command
    train_parser = subparsers.add_parser(
        "train", help="Train BPE on a text file and print the vocabulary"
    )
    train_parser.add_argument("--input-file", type=str, help="Input corpus file path")
    train_parser.add_argument(
        "--num-merges", type=int, default=100, help="Maximum number of merges"
    )
    train_parser.add_argument(
        "--end-of-word",
        type=str,
        default="_",
        help='End-of-word marker appended to every word (default: "_")',
    )
    train_parser.add_argument(
        "--tokenize",
        type=str,
        default=None,
        help="If provided, tokenize this text with the trained vocabulary",
    )
    train_parser.add_argument(
        "--profile",
        action="store_true",
        help="Run with cProfile for performance analysis",
    )
    train_parser.set_defaults(func=command_train)

    # Parse arguments
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Execute command
    if hasattr(args, "profile") and args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        args.func(args)
        profiler.disable()
        profiler.print_stats(sort="tottime")
    else:
        args.func(args)


if __name__ == "__main__":
    main()

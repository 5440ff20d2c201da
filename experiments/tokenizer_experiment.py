import argparse
import pathlib
import sys

import numpy as np

import charbpe.logger as logger
from charbpe.bpe import train_bpe_from_file

# Run this with
# $ uv run -m experiments.tokenizer_experiment encode --train-file <corpus> \
#       --input-file <text> --num-merges 500


def token_length_stats(tokens: list[str]) -> dict[str, float]:
    lengths = np.array([len(token) for token in tokens], dtype=np.int64)
    if lengths.size == 0:
        return {"count": 0, "mean": 0.0, "median": 0.0, "max": 0}

    return {
        "count": int(lengths.size),
        "mean": float(lengths.mean()),
        "median": float(np.median(lengths)),
        "max": int(lengths.max()),
    }


def encode_command(args):
    train_file = pathlib.Path(args.train_file)
    input_file = pathlib.Path(args.input_file)

    trainer = train_bpe_from_file(train_file, args.num_merges)
    tokenizer = trainer.tokenizer()

    logger.info(f"Start encoding: {input_file}")
    with open(input_file, encoding="utf-8") as f:
        text = f.read()
        tokens = tokenizer.tokenize(text)
    logger.info(f"Done encoding: {input_file}")

    stats = token_length_stats(tokens)
    input_length = len(text)
    print(f"Encoding output length: {len(tokens)}")
    print(f"Input length: {input_length}")
    if tokens:
        print(f"Characters per token: {input_length / len(tokens)}")
    print(
        f"Token length mean: {stats['mean']:.3f}, "
        f"median: {stats['median']:.1f}, max: {stats['max']}"
    )

    # Save token IDs to file if output_file is provided
    if args.output_file:
        output_file = pathlib.Path(args.output_file)
        ids = tokenizer.encode(text)
        ids_array = np.array(ids, dtype=np.int32)
        np.save(output_file, ids_array)
        print(f"Token IDs saved to {output_file}.npy")


def main():
    parser = argparse.ArgumentParser(description="Character-level BPE tokenizer")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    encode_parser = subparsers.add_parser(
        "encode", help="Train on one file, then tokenize another"
    )
    encode_parser.add_argument(
        "--train-file", type=str, help="Corpus used to learn the vocabulary"
    )
    encode_parser.add_argument("--input-file", type=str, help="File to encode")
    encode_parser.add_argument(
        "--num-merges", type=int, default=500, help="Maximum number of merges"
    )
    encode_parser.add_argument(
        "--output-file",
        type=str,
        help="If provided, will write encode result (vocabulary indices, -1 for unknown) into the file as numpy array as int32",
    )

    encode_parser.set_defaults(func=encode_command)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()

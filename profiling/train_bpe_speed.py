import time
import pathlib
import cProfile

from charbpe.bpe import train_bpe_from_file

# Run this with
# $ uv run -m profiling.train_bpe_speed


FIXTURES_PATH = (pathlib.Path(__file__).resolve().parent).parent / "tests" / "fixtures"


def main():
    input_path = FIXTURES_PATH / "corpus.txt"
    start_time = time.time()
    trainer = train_bpe_from_file(input_path=input_path, num_merges=200)
    end_time = time.time()
    print(f"{len(trainer.merges)} merges in {end_time - start_time} seconds")


if __name__ == "__main__":
    # main()
    cProfile.run("main()", sort="tottime")

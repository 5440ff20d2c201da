import re
import matplotlib.pyplot as plt
from datetime import datetime
import argparse
import statistics

"""
BPE training log file format:

2026-10-18 23:09:09,441 - INFO - vocab len: 27
2026-10-18 23:09:09,442 - INFO - Selected pair: ('e', 'r')
2026-10-18 23:09:09,443 - INFO - vocab len: 28
2026-10-18 23:09:09,444 - INFO - Selected pair: ('er', '_')

The last "vocab len" line may have no pair after it: training stopped because
no pair was left.
"""

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S,%f"
VOCAB_PATTERN = r"(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3}) - INFO - vocab len: (\d+)"
PAIR_PATTERN = r"Selected pair: (.+)"


def parse_log_lines(lines):
    """
    Extract timestamps, vocab lengths, and selected pairs.

    Returns:
        tuple: (timestamps, lengths, pairs). The i-th pair is the one selected
        right after the i-th vocab len line, or None if none was selected.
    """
    timestamps = []
    lengths = []
    pairs = []

    for line in lines:
        line = line.strip()
        if not line:
            continue

        vocab_match = re.match(VOCAB_PATTERN, line)
        if vocab_match:
            timestamps.append(datetime.strptime(vocab_match.group(1), TIMESTAMP_FORMAT))
            lengths.append(int(vocab_match.group(2)))
            pairs.append(None)
            continue

        pair_match = re.search(PAIR_PATTERN, line)
        if pair_match and pairs:
            pairs[-1] = pair_match.group(1)

    return timestamps, lengths, pairs


def parse_log_file(filename):
    with open(filename, "r", encoding="utf-8") as file:
        return parse_log_lines(file)


def analyze_processing_times(timestamps, pairs, slow_threshold):
    """
    Print statistics of the time spent on each merge.

    Returns:
        list: time intervals in seconds between consecutive vocab len lines.
    """
    time_intervals = []
    slow_pairs: list[tuple[str, float]] = []
    for i in range(1, len(timestamps)):
        interval = (timestamps[i] - timestamps[i - 1]).total_seconds()
        time_intervals.append(interval)

        if interval > slow_threshold and pairs[i - 1] is not None:
            slow_pairs.append((pairs[i - 1], interval))

    print("\n" + "=" * 50)
    print("TIME BETWEEN MERGES STATISTICS")
    print("=" * 50)

    if time_intervals:
        print(f"Min time between merges: {min(time_intervals):.6f} seconds")
        print(f"Max time between merges: {max(time_intervals):.6f} seconds")
        print(f"Average time between merges: {statistics.mean(time_intervals):.6f} seconds")
        print(f"Median time between merges: {statistics.median(time_intervals):.6f} seconds")
    else:
        print("No time intervals found.")

    merged = [pair for pair in pairs if pair is not None]
    print(f"Total pairs merged: {len(merged)}")

    if slow_pairs:
        print(f"\nPairs taking more than {slow_threshold} seconds to process:")
        for pair_info, proc_time in slow_pairs:
            print(f"  {pair_info} -> {proc_time:.6f} seconds")
    else:
        print(f"\nNo pair took more than {slow_threshold} seconds to process.")

    print("=" * 50)

    return time_intervals


def create_plot(timestamps, lengths, time_intervals, output_file=None):
    """
    Create side-by-side plots of vocab length over time and time between merges.
    """
    if not timestamps or not lengths:
        print("No data to plot.")
        return

    start_time = timestamps[0]
    time_from_start = [(ts - start_time).total_seconds() for ts in timestamps]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))

    ax1.plot(time_from_start, lengths, marker="o", linestyle="-", linewidth=1, markersize=2)
    ax1.set_title("Vocabulary Length Over Time", fontsize=14, fontweight="bold")
    ax1.set_xlabel("Time from Start (seconds)", fontsize=12)
    ax1.set_ylabel("Vocabulary Length", fontsize=12)
    ax1.grid(True, alpha=0.3)

    if time_intervals:
        # First interval ends at the second merge
        merge_numbers = list(range(2, len(timestamps) + 1))
        ax2.plot(
            merge_numbers,
            time_intervals,
            marker="s",
            linestyle="-",
            linewidth=1,
            markersize=2,
            color="orange",
        )
        ax2.set_title("Time Between Merges", fontsize=14, fontweight="bold")
        ax2.set_xlabel("Merge Number", fontsize=12)
        ax2.set_ylabel("Time Interval (seconds)", fontsize=12)
        ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_file:
        plt.savefig(output_file, dpi=300, bbox_inches="tight")
        print(f"Plot saved to {output_file}")

    plt.show()


def main():
    parser = argparse.ArgumentParser(
        description="Parse BPE training log and plot vocab length over time"
    )
    parser.add_argument("filename", help="Path to the log file")
    parser.add_argument("-o", "--output", help="Output file for the plot (optional)")
    parser.add_argument(
        "--slow-threshold",
        type=float,
        default=1.0,
        help="Report merges slower than this many seconds (default: 1.0)",
    )

    args = parser.parse_args()

    print(f"Parsing log file: {args.filename}")
    timestamps, lengths, pairs = parse_log_file(args.filename)

    if timestamps:
        print(f"Successfully parsed {len(timestamps)} vocab entries")
        time_intervals = analyze_processing_times(timestamps, pairs, args.slow_threshold)
        create_plot(timestamps, lengths, time_intervals, args.output)
    else:
        print("No valid vocab data found in the log file.")


if __name__ == "__main__":
    main()

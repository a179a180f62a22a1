import argparse
import concurrent.futures
import logging
import os
import sys
import time

import psutil
from tqdm import tqdm

from .config import SegmenterConfig
from .dictionary import default_dictionary_path, load_dictionary
from .errors import DictionaryNotFound, InvalidDictionary
from .segmenter import ThaiSegmenter

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def get_memory_mb():
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def run_concurrently(segment_func, lines, workers):
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        # Map returns an iterator, converting to list forces execution
        list(executor.map(segment_func, lines))


def read_lines(paths, limit=-1):
    lines = []
    for filepath in paths:
        if limit == 0:
            break
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                if limit == 0:
                    break
                line = line.strip()
                if not line:
                    continue

                lines.append(line)
                if limit > 0:
                    limit -= 1
    return lines


def run_benchmark(seg, lines, threads):
    count = len(lines)
    total_mb = sum(len(line.encode('utf-8')) for line in lines) / (1024 * 1024)
    print(f"\n--- Input Benchmark ({count} lines, {total_mb:.2f} MB) ---")
    print(f"Initial Memory: {get_memory_mb():.2f} MB")

    # 1. Sequential
    print("[1 Thread] Processing...", end="", flush=True)
    start_time = time.time()
    start_mem = get_memory_mb()

    for line in lines:
        seg.segment(line)

    dur_seq = max(time.time() - start_time, 0.001)
    end_mem = get_memory_mb()

    print(f" Done in {dur_seq:.3f}s")
    print(f"Throughput: {count / dur_seq:.2f} lines/sec ({total_mb / dur_seq:.2f} MB/s)")
    print(f"Mem Delta: {end_mem - start_mem:.2f} MB")

    # 2. Concurrent, sharing one dictionary index
    if threads > 1:
        print(f"\n[{threads} Threads] Processing...", end="", flush=True)
        start_time = time.time()
        start_mem = get_memory_mb()

        run_concurrently(seg.segment, lines, threads)

        dur_conc = max(time.time() - start_time, 0.001)
        end_mem = get_memory_mb()

        print(f" Done in {dur_conc:.3f}s")
        print(f"Throughput: {count / dur_conc:.2f} lines/sec ({total_mb / dur_conc:.2f} MB/s)")
        print(f"Mem Delta: {end_mem - start_mem:.2f} MB")
        print(f"Speedup: {dur_seq / dur_conc:.2f}x")


def segment_files(seg, paths, limit, keep_whitespace, output=None):
    lines = read_lines(paths, limit)

    if output is None:
        for line in lines:
            tokens = seg.tokenize(line, keep_whitespace)
            print(f"Original:  {line}")
            print(f"Segmented: {' | '.join(tokens)}")
            print("-" * 40)
        return

    with open(output, 'w', encoding='utf-8') as f_out:
        for line in tqdm(lines, desc="Segmenting"):
            tokens = seg.tokenize(line, keep_whitespace)
            f_out.write(" | ".join(tokens) + "\n")
    logger.info("Wrote %d lines to %s", len(lines), output)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Thai Word Segmenter CLI")
    parser.add_argument("text", nargs="*", help="Raw text to segment")
    parser.add_argument("--input", nargs="+", help="Input file(s), one text per line")
    parser.add_argument("--output", help="Write segmented lines here instead of stdout")
    parser.add_argument("--dict", dest="dict_path", help="Custom dictionary (one word per line)")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--benchmark", action="store_true", help="Run benchmark mode")
    parser.add_argument("--limit", type=int, default=-1, help="Limit number of lines")
    parser.add_argument("--threads", type=int, default=4, help="Number of threads for concurrent benchmark")
    parser.add_argument("--no-whitespace", action="store_true", help="Drop whitespace tokens")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = SegmenterConfig.from_yaml(args.config) if args.config else SegmenterConfig()
    dict_path = args.dict_path or config.dictionary_path or default_dictionary_path()
    keep_whitespace = config.keep_whitespace and not args.no_whitespace

    try:
        seg = ThaiSegmenter(load_dictionary(dict_path), config)
    except DictionaryNotFound:
        logger.error("Could not find dictionary at %s", dict_path)
        return 1
    except InvalidDictionary as e:
        logger.error("Invalid dictionary %s: %s", dict_path, e)
        return 1

    if args.benchmark and args.input:
        run_benchmark(seg, read_lines(args.input, args.limit), args.threads)
    elif args.input:
        segment_files(seg, args.input, args.limit, keep_whitespace, args.output)
    elif args.text:
        text = " ".join(args.text)
        tokens = seg.tokenize(text, keep_whitespace)
        print(f"Input:  {text}")
        print(f"Output: {' | '.join(tokens)}")
    else:
        print("Usage: python -m thai_segmenter [text ...] | --input <file> [--benchmark] [options]")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

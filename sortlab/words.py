"""Sorting the words of a text file alphabetically."""

from __future__ import annotations

import argparse
from pathlib import Path

SAMPLE_TEXT = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit\n"
    "quisque varius congue ex non mattis mauris vestibulum arcu ac\n"
    "dignissim tristique dolor nunc euismod ex scelerisque dictum libero velit a ipsum\n"
    "curabitur condimentum urna at consectetur mollis"
)


def count_words(text):
    """Return one more than the number of spaces and newlines in the text."""
    return 1 + sum(1 for ch in text if ch in " \n")


def insertion_sort_words(words):
    """Return the words in ascending order, sorted by straight insertion."""
    result = list(words)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and current < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def sort_file(source, target):
    """Read the words of source, write them sorted to target, each followed by a space.

    Returns the sorted words.
    """
    words = insertion_sort_words(Path(source).read_text().split())
    Path(target).write_text("".join(f"{word} " for word in words))
    return words


def main(argv=None):
    """Write the sample text to a file and its sorted words to another."""
    parser = argparse.ArgumentParser(description="Sort the words of a text file.")
    parser.add_argument("--source", default="file1.txt")
    parser.add_argument("--target", default="file2.txt")
    parser.add_argument("--keep", action="store_true", help="sort the existing source file")
    args = parser.parse_args(argv)
    if not args.keep:
        Path(args.source).write_text(SAMPLE_TEXT)
    try:
        sort_file(args.source, args.target)
    except OSError as exc:
        parser.error(str(exc))
    return 0
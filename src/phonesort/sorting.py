"""Sort a file of DDD-DDDD phone numbers with a comparison or a bitmap strategy."""
from __future__ import annotations

from array import array
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterator

from sortedcontainers import SortedSet

from .domain import EXCLUSIVE_MAX_NUMBER, encode, parse
from .errors import ArgumentError

WORD_TYPECODE = "I"
BITS_PER_WORD = array(WORD_TYPECODE).itemsize * 8
WORD_COUNT = -(-EXCLUSIVE_MAX_NUMBER // BITS_PER_WORD)


class SortMethod(str, Enum):
    NAIVE = "naive"
    BITWISE = "bitwise"

    @classmethod
    def parse(cls, name: str | None) -> "SortMethod":
        if name is None:
            raise ArgumentError("Specify a sort method name.")
        try:
            return cls(name.lower())
        except ValueError:
            raise ArgumentError(f"{name.lower()} sort method not supported.") from None


def _read_lines(path: Path) -> Iterator[str]:
    with Path(path).open() as f:
        for line in f:
            if line.strip():
                yield line.rstrip("\n")


def sort_naive(input_path: Path, output_path: Path) -> None:
    """Comparison sort: fixed-width encodings order the same as their numbers."""
    numbers = SortedSet()
    for line in _read_lines(input_path):
        parse(line)
        numbers.add(line)
    with Path(output_path).open("w") as f:
        for line in numbers:
            f.write(line + "\n")


def bit_position(n: int) -> tuple[int, int]:
    """Return the (word index, mask) that records ``n`` in the bitmap."""
    index, offset = divmod(n, BITS_PER_WORD)
    return index, 1 << offset


def sort_bitwise(input_path: Path, output_path: Path) -> None:
    """Bitmap sort: one presence bit per possible number, scanned in order."""
    words = array(WORD_TYPECODE, bytes(WORD_COUNT * BITS_PER_WORD // 8))
    for line in _read_lines(input_path):
        index, mask = bit_position(parse(line))
        words[index] |= mask
    with Path(output_path).open("w") as f:
        for index, word in enumerate(words):
            if not word:
                continue
            for offset in range(BITS_PER_WORD):
                if word & (1 << offset):
                    f.write(encode(index * BITS_PER_WORD + offset) + "\n")


SORTERS: Dict[SortMethod, Callable[[Path, Path], None]] = {
    SortMethod.NAIVE: sort_naive,
    SortMethod.BITWISE: sort_bitwise,
}


def sort_file(method: SortMethod, input_path: Path, output_path: Path) -> None:
    SORTERS[method](input_path, output_path)

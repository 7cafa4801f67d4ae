from __future__ import annotations

import random
from pathlib import Path
from typing import Optional, Set, TextIO

from .domain import EXCLUSIVE_MAX_NUMBER, VALID_NUMBER_COUNT, encode, is_valid_number


def generate(count: int, sink: TextIO, rng: Optional[random.Random] = None) -> None:
    """Write ``count`` distinct valid phone numbers to ``sink``, one per line.

    Numbers are drawn uniformly and rejected when already seen or invalid, so the
    output order is the draw order.
    """
    if not 0 <= count <= VALID_NUMBER_COUNT:
        raise ValueError(f"count must be between 0 and {VALID_NUMBER_COUNT}, got {count}")
    rng = rng or random.Random()
    seen: Set[int] = set()
    while len(seen) < count:
        n = rng.randrange(EXCLUSIVE_MAX_NUMBER)
        if n in seen or not is_valid_number(n):
            continue
        seen.add(n)
        sink.write(encode(n) + "\n")


def create_input_file(path: Path, count: int, seed: Optional[int] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        generate(count, f, random.Random(seed))
    return path

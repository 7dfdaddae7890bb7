"""Line-oriented integer filters that make up the processing pipeline.

Each stage reads whitespace-separated integers from its input:

* ``m`` multiplies every number by 7,
* ``a`` adds a fixed offset to every number,
* ``p`` cubes every number,
* ``s`` sums every number it reads and prints the total at the end.

The first three keep the line structure of their input. Numbers are 32-bit
signed integers; reading a line stops at the first item that is not one.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TextIO

ADD_OFFSET = 24
MULTIPLIER = 7

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)")


def _wrap32(value: int) -> int:
    """Reduce an integer to the 32-bit two's-complement range."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def parse_numbers(line: str) -> List[int]:
    """Read leading integers from a line, stopping at the first bad item."""
    numbers: List[int] = []
    pos = 0
    while True:
        match = _INTEGER_PATTERN.match(line, pos)
        if match is None:
            break
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            break
        numbers.append(value)
        pos = match.end()
    return numbers


def multiply(numbers: Iterable[int]) -> List[int]:
    """Multiply every number by 7."""
    return [_wrap32(num * MULTIPLIER) for num in numbers]


def add(numbers: Iterable[int], n: int = ADD_OFFSET) -> List[int]:
    """Add ``n`` to every number."""
    return [_wrap32(num + n) for num in numbers]


def cube(numbers: Iterable[int]) -> List[int]:
    """Raise every number to the third power."""
    return [_wrap32(num * num * num) for num in numbers]


def total(numbers: Iterable[int]) -> int:
    """Sum the numbers."""
    return sum(numbers)


_LINE_STAGES: Dict[str, Callable[[List[int]], List[int]]] = {
    "m": multiply,
    "a": add,
    "p": cube,
}
STAGE_NAMES = ("m", "a", "p", "s")


def run_stage(name: str, stdin: TextIO, stdout: TextIO) -> None:
    """Run the stage called ``name`` from ``stdin`` to ``stdout``."""
    key = name.lower()
    if key == "s":
        grand_total = sum(total(parse_numbers(line)) for line in stdin)
        stdout.write(f"{grand_total}\n")
        return
    try:
        transform = _LINE_STAGES[key]
    except KeyError:
        raise ValueError(f"unknown stage: {name!r}") from None
    for line in stdin:
        stdout.write(" ".join(str(num) for num in transform(parse_numbers(line))))
        stdout.write("\n")
    stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one stage between standard input and standard output."""
    parser = argparse.ArgumentParser(
        prog="oslab-stage",
        description="Run one stage of the integer pipeline.",
    )
    parser.add_argument(
        "stage",
        type=str.lower,
        choices=STAGE_NAMES,
        help="m: multiply by 7, a: add offset, p: cube, s: sum",
    )
    args = parser.parse_args(argv)
    run_stage(args.stage, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
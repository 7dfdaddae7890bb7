"""Demonstration of the Number and Vector types, printed to standard output."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Optional, Sequence

from oslab.number import ONE, ZERO, Number
from oslab.vector import ONE_ONE_VECTOR, ZERO_VECTOR, Vector


def _fmt(value: Number) -> str:
    """Render a number with six significant digits, like a default stream."""
    return f"{float(value):g}"


def _pair(vector: Vector) -> str:
    return f"({_fmt(vector.x)}, {_fmt(vector.y)})"


def _demo_lines() -> Iterator[str]:
    yield "Number Library Test"

    a = Number(5.0)
    b = Number(3.0)
    yield f"a = {_fmt(a)}"
    yield f"b = {_fmt(b)}"
    yield f"a + b = {_fmt(a + b)}"
    yield f"a - b = {_fmt(a - b)}"
    yield f"a * b = {_fmt(a * b)}"
    yield f"a / b = {_fmt(a / b)}"
    yield f"NUMBER_ZERO = {_fmt(ZERO)}"
    yield f"NUMBER_ONE = {_fmt(ONE)}"

    yield ""
    yield "Vector Library Test==="

    v1 = Vector(Number(3.0), Number(4.0))
    v2 = Vector(Number(1.0), Number(2.0))
    v3 = v1 + v2
    yield f"Vector v1: {_pair(v1)}"
    yield f"Vector v2: {_pair(v2)}"
    yield f"Vector v1 + v2: {_pair(v3)}"
    yield f"v1 polar: r={_fmt(v1.r())}, phi={_fmt(v1.phi())}"
    yield f"v2 polar: r={_fmt(v2.r())}, phi={_fmt(v2.phi())}"
    yield f"VECTOR_ZERO: {_pair(ZERO_VECTOR)}"
    yield f"VECTOR_ONE_ONE: {_pair(ONE_ONE_VECTOR)}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the Number and Vector demonstration."""
    parser = argparse.ArgumentParser(
        prog="oslab-libdemo",
        description="Exercise the Number and Vector types.",
    )
    parser.parse_args(argv)
    for line in _demo_lines():
        sys.stdout.write(line + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
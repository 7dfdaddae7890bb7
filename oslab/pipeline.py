"""Run the integer stages as a chain of child processes joined by pipes.

The input line goes to ``m``, its output to ``a``, then ``p``, and finally
``s``, whose printed total is the result of the pipeline.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from oslab.stages import ADD_OFFSET, MULTIPLIER, STAGE_NAMES

DEFAULT_INPUT = "1 2 3 4 5"
PIPELINE_ORDER = ("m", "a", "p", "s")

_PACKAGE_PARENT = Path(__file__).resolve().parent.parent


def stage_command(name: str) -> List[str]:
    """Return the command line that runs the stage called ``name``."""
    key = name.lower()
    if key not in STAGE_NAMES:
        raise ValueError(f"unknown stage: {name!r}")
    return [sys.executable, "-m", "oslab.stages", key]


def _child_env() -> Dict[str, str]:
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    parts = [str(_PACKAGE_PARENT)]
    if existing:
        parts.append(existing)
    env["PYTHONPATH"] = os.pathsep.join(parts)
    return env


def run_pipeline(text: str) -> str:
    """Feed ``text`` through the m, a, p and s stages and return the total.

    Raises ``subprocess.CalledProcessError`` if any stage exits with a
    non-zero status.
    """
    env = _child_env()
    processes: List[subprocess.Popen] = []
    upstream = subprocess.PIPE
    try:
        for name in PIPELINE_ORDER:
            proc = subprocess.Popen(
                stage_command(name),
                stdin=upstream,
                stdout=subprocess.PIPE,
                text=True,
                env=env,
            )
            if processes:
                # The previous stage's output now belongs to this child only.
                processes[-1].stdout.close()
            processes.append(proc)
            upstream = proc.stdout

        first, last = processes[0], processes[-1]
        first.stdin.write(text + "\n")
        first.stdin.close()
        output, _ = last.communicate()
        for proc in processes:
            proc.wait()
    finally:
        for proc in processes:
            if proc.poll() is None:
                proc.kill()
                proc.wait()

    for name, proc in zip(PIPELINE_ORDER, processes):
        if proc.returncode != 0:
            raise subprocess.CalledProcessError(proc.returncode, stage_command(name))
    return output.strip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a line of numbers, run it through the pipeline and print the total."""
    parser = argparse.ArgumentParser(
        prog="oslab-pipeline",
        description="Send a line of integers through the m, a, p, s stages.",
    )
    parser.parse_args(argv)

    print("PIPELINE PROCESSES DEMONSTRATION")
    print(f"M: Multiply by {MULTIPLIER}")
    print(f"A: Add {ADD_OFFSET}")
    print("P: Cube (x^3)")
    print("S: Sum all numbers")
    print()
    print("Enter numbers separated by spaces: ", end="", flush=True)

    line = sys.stdin.readline()
    if not line:
        print()
        return 0
    data = line.rstrip("\r\n")
    if not data:
        data = DEFAULT_INPUT
        print(f"Using default input: {data}")

    try:
        result = run_pipeline(data)
    except subprocess.CalledProcessError as err:
        print(f"Stage failed: {' '.join(err.cmd)} (exit code {err.returncode})", file=sys.stderr)
        return 1
    except OSError as err:
        print(f"Failed to start pipeline: {err}", file=sys.stderr)
        return 1

    print(f"RESULT: {result}")
    print()
    print("Pipeline execution completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
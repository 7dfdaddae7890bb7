"""Terminate processes by PID or by name.

Targets come from three places, handled in this order:

* the comma-separated names in the ``PROC_TO_KILL`` environment variable,
* ``--id PID``,
* ``--name NAME``.

Processes are found by reading ``<proc_root>/<pid>/comm``. This process
never terminates itself.
"""

from __future__ import annotations

import os
import re
import signal
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

PROC_ROOT = "/proc"
ENV_VAR = "PROC_TO_KILL"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class KillerArgs:
    """Targets named on the command line; 0 and "" mean "none"."""

    pid: int = 0
    name: str = ""


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def iter_processes(proc_root: str = PROC_ROOT) -> Iterator[Tuple[int, str]]:
    """Yield ``(pid, name)`` for every process listed under ``proc_root``.

    Raises ``OSError`` if ``proc_root`` cannot be opened. Entries that are not
    process directories, or whose name cannot be read, are skipped.
    """
    with os.scandir(proc_root) as entries:
        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
            except OSError:
                continue
            pid = _atoi(entry.name)
            if pid == 0:
                continue
            try:
                with Path(entry.path, "comm").open(encoding="utf-8", errors="replace") as comm:
                    name = comm.readline()
            except OSError:
                continue
            yield pid, name.rstrip("\r\n")


def find_pids(name: str, proc_root: str = PROC_ROOT) -> List[int]:
    """Return the PIDs of all processes called exactly ``name``."""
    if not name:
        return []
    return [pid for pid, proc_name in iter_processes(proc_root) if proc_name == name]


def kill_by_name(name: str, proc_root: str = PROC_ROOT) -> List[int]:
    """Send SIGTERM to every process called ``name``; return the PIDs signalled.

    The calling process is skipped. Processes that cannot be signalled are
    left out of the result.
    """
    own_pid = os.getpid()
    killed: List[int] = []
    for pid in find_pids(name, proc_root):
        if pid == own_pid:
            continue
        try:
            os.kill(pid, signal.SIGTERM)
        except OSError:
            continue
        killed.append(pid)
    return killed


def kill_by_id(pid: int) -> bool:
    """Send SIGTERM to ``pid``; return whether the signal was delivered.

    Raises ``ValueError`` for PID 0 or the calling process's own PID.
    """
    if pid == 0 or pid == os.getpid():
        raise ValueError("Invalid PID or attempt to kill self")
    try:
        os.kill(pid, signal.SIGTERM)
    except OSError:
        return False
    return True


def targets_from_env(value: Optional[str]) -> List[str]:
    """Split a ``PROC_TO_KILL`` value into process names, dropping empty ones."""
    if value is None:
        return []
    return [name for name in value.split(",") if name]


def parse_args(argv: Iterable[str]) -> KillerArgs:
    """Read ``--id PID`` and ``--name NAME``; other arguments are ignored."""
    pid = 0
    name = ""
    tokens = iter(argv)
    for token in tokens:
        if token == "--id":
            value = next(tokens, None)
            if value is None:
                break
            pid = _atoi(value)
        elif token == "--name":
            value = next(tokens, None)
            if value is None:
                break
            name = value
    return KillerArgs(pid=pid, name=name)


def _kill_name_and_report(name: str) -> None:
    try:
        killed = kill_by_name(name)
    except OSError:
        print(f"Failed to open {PROC_ROOT}")
        return
    for pid in killed:
        print(f"Killed process: {name} (PID: {pid})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Kill the processes named by the environment and the command line."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    for target in targets_from_env(os.environ.get(ENV_VAR)):
        _kill_name_and_report(target)

    if args.pid != 0:
        try:
            delivered = kill_by_id(args.pid)
        except ValueError as err:
            print(err)
        else:
            if delivered:
                print(f"Killed process by PID: {args.pid}")
            else:
                print(f"Failed to kill PID: {args.pid}")

    if args.name:
        _kill_name_and_report(args.name)

    return 0


if __name__ == "__main__":
    sys.exit(main())
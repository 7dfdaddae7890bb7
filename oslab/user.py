"""Exercise the process killer against a few ``sleep`` processes."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from oslab.killer import ENV_VAR, PROC_ROOT, find_pids

_PACKAGE_PARENT = Path(__file__).resolve().parent.parent


def process_count(name: str, proc_root: str = PROC_ROOT) -> int:
    """Count processes called exactly ``name``; 0 if the table is unreadable."""
    try:
        return len(find_pids(name, proc_root))
    except OSError:
        return 0


def is_process_alive(pid: int) -> bool:
    """Return whether a process with this PID exists and can be signalled."""
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def launch_app(args: Sequence[str]) -> subprocess.Popen:
    """Start a program without waiting for it.

    Raises ``ValueError`` for an empty command and ``OSError`` if the
    program cannot be started.
    """
    command = list(args)
    if not command:
        raise ValueError("no program to launch")
    return subprocess.Popen(command)


def _child_env() -> Dict[str, str]:
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    parts = [str(_PACKAGE_PARENT)]
    if existing:
        parts.append(existing)
    env["PYTHONPATH"] = os.pathsep.join(parts)
    return env


def run_killer(args: Union[str, Sequence[str]] = "") -> int:
    """Run the killer with ``args`` and wait for it; return its exit status."""
    tokens: List[str] = args.split() if isinstance(args, str) else list(args)
    command = [sys.executable, "-m", "oslab.killer", *tokens]
    return subprocess.run(command, env=_child_env()).returncode


def _reap(processes: List[subprocess.Popen]) -> None:
    for proc in processes:
        proc.poll()


def _launch_sleepers(count: int) -> List[subprocess.Popen]:
    print("Launching several sleep processes...")
    launched: List[subprocess.Popen] = []
    for _ in range(count):
        try:
            launched.append(launch_app(["sleep", "60"]))
        except OSError as err:
            print(f"Failed to launch app: {err}", file=sys.stderr)
    return launched


def _count_round(killer_args: str, launched: List[subprocess.Popen]) -> None:
    time.sleep(1)
    print(f"sleep count before killer: {process_count('sleep')}")
    run_killer(killer_args)
    time.sleep(1)
    _reap(launched)
    print(f"sleep count after killer: {process_count('sleep')} (should be 0)")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the environment, --name and --id killer scenarios."""
    parser = argparse.ArgumentParser(
        prog="oslab-user",
        description="Start sleep processes and terminate them with the killer.",
    )
    parser.parse_args(argv)

    os.environ[ENV_VAR] = "sleep"
    try:
        print(f'Environment variable {ENV_VAR} set to "sleep"')

        print("\n--- Test killing by environment variable ---")
        _count_round("", _launch_sleepers(3))

        print("\n--- Test with --name parameter ---")
        _count_round("--name sleep", _launch_sleepers(2))

        print("\n--- Test with --id parameter ---")
        print("Launching sleep process...")
        try:
            proc = launch_app(["sleep", "60"])
        except OSError:
            print("Failed to launch sleep")
        else:
            time.sleep(1)
            if is_process_alive(proc.pid):
                print(f"sleep launched, PID: {proc.pid}")
            run_killer(f"--id {proc.pid}")
            time.sleep(1)
            proc.poll()
            if not is_process_alive(proc.pid):
                print("sleep successfully killed by PID")
    finally:
        os.environ.pop(ENV_VAR, None)

    print(f"\nEnvironment variable {ENV_VAR} removed")
    print("\nPress Enter to exit...", end="", flush=True)
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())
import os
import signal
import subprocess
import sys

import pytest

from oslab.user import is_process_alive, launch_app, process_count, run_killer


@pytest.fixture
def sleeper():
    proc = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(60)"])
    yield proc
    if proc.poll() is None:
        proc.kill()
    proc.wait()


def _make_proc(root, entries):
    for pid, name in entries.items():
        directory = root / str(pid)
        directory.mkdir()
        (directory / "comm").write_text(name + "\n")


def test_process_count_counts_exact_matches(tmp_path):
    _make_proc(tmp_path, {10: "sleep", 11: "sleep", 12: "cat", 13: "sleepy"})
    assert process_count("sleep", str(tmp_path)) == 2
    assert process_count("cat", str(tmp_path)) == 1


def test_process_count_includes_own_process(tmp_path):
    _make_proc(tmp_path, {os.getpid(): "me"})
    assert process_count("me", str(tmp_path)) == 1


def test_process_count_empty_name(tmp_path):
    _make_proc(tmp_path, {10: "sleep"})
    assert process_count("", str(tmp_path)) == 0


def test_process_count_unreadable_root(tmp_path):
    assert process_count("sleep", str(tmp_path / "missing")) == 0


def test_is_process_alive_for_self():
    assert is_process_alive(os.getpid()) is True


def test_is_process_alive_for_finished_child():
    proc = subprocess.Popen([sys.executable, "-c", "pass"])
    proc.wait()
    assert is_process_alive(proc.pid) is False


def test_launch_app_runs_program():
    proc = launch_app([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert proc.wait(timeout=30) == 3


def test_launch_app_rejects_empty_command():
    with pytest.raises(ValueError):
        launch_app([])


def test_launch_app_missing_program():
    with pytest.raises(OSError):
        launch_app(["definitely-not-a-real-program-oslab"])


def test_run_killer_by_id_string(sleeper, monkeypatch):
    monkeypatch.delenv("PROC_TO_KILL", raising=False)
    assert is_process_alive(sleeper.pid) is True
    assert run_killer(f"--id {sleeper.pid}") == 0
    assert sleeper.wait(timeout=10) == -signal.SIGTERM


def test_run_killer_accepts_sequence(sleeper, monkeypatch):
    monkeypatch.delenv("PROC_TO_KILL", raising=False)
    assert run_killer(["--id", str(sleeper.pid)]) == 0
    assert sleeper.wait(timeout=10) == -signal.SIGTERM


def test_run_killer_without_targets_leaves_process(sleeper, monkeypatch):
    monkeypatch.delenv("PROC_TO_KILL", raising=False)
    assert run_killer("") == 0
    assert sleeper.poll() is None
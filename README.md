# oslab

A small collection of operating-system exercises in pure Python:

- `oslab.channel` — `BufferedChannel`, a bounded, thread-safe FIFO channel,
  and the `ChannelClosed` exception.
- `oslab.number` — `Number`, an immutable floating-point value with
  arithmetic operators, and the constants `ZERO` and `ONE`.
- `oslab.vector` — `Vector`, a plane vector of `Number` components, and the
  constants `ZERO_VECTOR` and `ONE_ONE_VECTOR`.
- `oslab.stages` and `oslab.pipeline` — a four-stage integer pipeline
  (multiply by 7, add 24, cube, sum), each stage running as its own child
  process, connected by pipes.
- `oslab.killer` and `oslab.user` — a process killer that works from `/proc`
  and a driver that exercises it against `sleep` processes.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

### BufferedChannel

```python
from oslab.channel import BufferedChannel

with BufferedChannel(2) as channel:
    channel.send(1)
    print(channel.recv())   # (1, True)
```

- `BufferedChannel(capacity)` raises `ValueError` unless `capacity` is
  positive.
- `send(value)` blocks while the buffer is full; on a closed channel it
  raises `ChannelClosed` (a `RuntimeError`).
- `recv()` blocks while the buffer is empty and returns `(value, True)`, or
  `(None, False)` once the channel is closed and drained. Values buffered
  before `close()` can still be received.
- `close()` wakes every waiting sender and receiver; closing twice is
  harmless. Leaving a `with` block closes the channel.
- Iterating over a channel yields values until it is closed and drained.
- The `capacity` and `closed` properties report the channel's state.

### Number and Vector

```python
from oslab.number import Number
from oslab.vector import Vector

a = Number(5.0)
b = Number(3.0)
print(float(a / b))

v = Vector(Number(3.0), Number(4.0))
print(float(v.r()), float(v.phi()))
print(v + Vector(1.0, 2.0))
```

`Number` supports `+`, `-`, `*` and `/` between numbers and converts with
`float()`; dividing by a zero `Number` raises `ZeroDivisionError`.

`Vector(x, y)` defaults both components to zero and converts plain numbers to
`Number`. `r()` gives its length and `phi()` its polar angle in radians, both
as `Number`; `+` adds two vectors component-wise.

### Stages

`oslab.stages` provides the stage functions on lists of integers:
`parse_numbers(line)`, `multiply(numbers)`, `add(numbers, n=24)`,
`cube(numbers)` and `total(numbers)`, and `run_stage(name, stdin, stdout)`,
which runs stage `m`, `a`, `p` or `s` between two text streams. Numbers are
32-bit signed integers: reading a line stops at the first item that is not
one, and results of `multiply`, `add` and `cube` wrap around in 32 bits.
The `s` stage sums everything it reads and prints the total once.

`oslab.pipeline.run_pipeline(text)` sends a line through all four stages as
child processes and returns the printed total as a string; it raises
`subprocess.CalledProcessError` if a stage fails.

### Killer

`oslab.killer` offers `iter_processes(proc_root)`, `find_pids(name,
proc_root)`, `kill_by_name(name, proc_root)`, `kill_by_id(pid)`,
`targets_from_env(value)` and `parse_args(argv)`. `kill_by_id` raises
`ValueError` for PID 0 or the caller's own PID; neither kill function ever
signals the calling process.

`oslab.user` offers `process_count(name, proc_root)`,
`is_process_alive(pid)`, `launch_app(args)` and `run_killer(args)`.

## Commands

`oslab-libdemo` prints a walkthrough of `Number` and `Vector` arithmetic,
including the polar form of a few vectors.

`oslab-pipeline` asks for a line of whole numbers, passes it through the
stages and prints `RESULT:` with the final sum. An empty line uses
`1 2 3 4 5`.

`oslab-stage STAGE` runs one stage (`m`, `a`, `p` or `s`) from standard
input to standard output; the pipeline starts it once per stage.

`oslab-killer` sends `SIGTERM` to processes:

```
oslab-killer --id 12345
oslab-killer --name sleep
PROC_TO_KILL=sleep,yes oslab-killer
```

Every comma-separated name in the `PROC_TO_KILL` environment variable is
handled first, then the process given by `--id`, then every process whose
name matches `--name`. Names are matched exactly against `/proc/<pid>/comm`.
Unknown arguments are ignored and the command always exits with status 0.

`oslab-user` launches a few `sleep 60` processes and runs the killer against
them by environment variable, by name and by process id, printing how many
were left running after each round. It waits for Enter before exiting.

## Limitations

- The killer and the driver find processes through `/proc`, so they work
  only on Linux and similar systems that provide it. There is no support
  for the Windows process table.
- The killer only sends `SIGTERM`; it does not wait for processes to exit
  or escalate to a stronger signal.
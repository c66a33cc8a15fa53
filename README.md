# ossim

Small, dependency-free simulators for algorithms met in an operating-systems
course. Each function takes plain Python data and returns a result object you
can inspect or print.

## What is included

- **Process model** (`ossim.models`): `Process` (pid, arrival, burst,
  priority), `make_processes` to build numbered processes from parallel lists,
  and `Schedule`, the result every CPU scheduler returns. A `Schedule` holds a
  `ProcessResult` for each process in completion order (with `turnaround`,
  `waiting` and `response` properties) and offers `average_waiting()`,
  `average_turnaround()`, `average_response()`, `cpu_utilization()` (percent
  of time up to the last completion not spent idle), `throughput()`,
  `by_pid()` and `table()`, a tab-separated table ordered by pid.
- **Non-preemptive CPU scheduling** (`ossim.nonpreemptive`): `fcfs` runs
  processes in the order given, `sjf` in order of burst time, and
  `priority_order` in order of priority number, lowest first. Throughput is
  measured from time 0.
- **Shortest remaining time first** (`ossim.srtf`): `srtf` runs one time unit
  at a time on the ready process with the least work left; ties go to the
  earlier arrival.
- **Preemptive priority** (`ossim.priority`): `preemptive_priority` picks the
  ready process with the lowest priority number, or the highest with
  `higher_is_better=True`.
- **Page replacement** (`ossim.paging`): `fifo` and `lru` return a
  `PagingResult` whose `steps` record each reference, the frame contents after
  it (empty frames are `None`) and whether it was a hit, together with `hits`
  and `misses` counts.
- **Deadlock avoidance** (`ossim.bankers`): `BankersState` checks its
  allocation, maximum and available vectors, computes `need()`, and offers
  `is_safe()` and `safe_sequence()`, which raises `UnsafeStateError` (carrying
  the processes that could finish in `completed`) when no safe order exists.
- **Load pairing** (`ossim.vehicles`): `min_vehicles` counts the vehicles
  needed when each carries at most two loads within a weight limit.

Empty process lists, processes with no burst time, fewer than one page frame
and inconsistent matrices raise `ValueError`.

## What it does not do

There is no command-line program: the package is a library to call from
Python. It does not simulate disk-head scheduling or round-robin CPU
scheduling.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

CPU scheduling:

```python
from ossim.models import make_processes
from ossim.srtf import srtf
from ossim.nonpreemptive import sjf
from ossim.priority import preemptive_priority

procs = make_processes([0, 1, 2], [5, 3, 1], [2, 1, 3])

schedule = srtf(procs)
print(schedule.table())
print(schedule.average_waiting(), schedule.cpu_utilization())

print(sjf(procs).average_turnaround())
print(preemptive_priority(procs, higher_is_better=True).by_pid())
```

Page replacement:

```python
from ossim.paging import fifo, lru

result = lru([7, 0, 1, 2, 0, 3, 0, 4], 3)
print(result.hits, result.misses)   # 2 6
for step in fifo([1, 2, 1, 3], 2).steps:
    print(step.symbol, step.frames, step.hit)
```

Banker's algorithm:

```python
from ossim.bankers import BankersState, UnsafeStateError

state = BankersState(
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
    available=[3, 3, 2],
)
try:
    print(state.safe_sequence())    # [1, 3, 4, 0, 2]
except UnsafeStateError as error:
    print("unsafe; could finish:", error.completed)
```

Load pairing:

```python
from ossim.vehicles import min_vehicles

print(min_vehicles([1, 2, 3, 4, 5], 6))   # 3
```
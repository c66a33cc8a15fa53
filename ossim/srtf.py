"""Shortest remaining time first: preemptive shortest job scheduling."""

from __future__ import annotations

from typing import Iterable

from .models import Process, ProcessResult, Schedule


def srtf(processes: Iterable[Process]) -> Schedule:
    """Run one time unit at a time, always on the ready process with least work left.

    Ties on remaining time go to the earlier arrival, then to the process given
    first. Results are in completion order; idle time counts every unit the CPU
    waited for the next arrival, including any before the first one.
    """
    procs = list(processes)
    if not procs:
        raise ValueError("no processes to schedule")
    for proc in procs:
        if proc.burst < 1:
            raise ValueError(f"process {proc.pid} has no work to do")

    remaining = {index: proc.burst for index, proc in enumerate(procs)}
    starts: dict[int, int] = {}
    results: list[ProcessResult] = []
    clock = 0
    idle = 0

    while remaining:
        ready = [i for i in remaining if procs[i].arrival <= clock]
        if not ready:
            next_arrival = min(procs[i].arrival for i in remaining)
            idle += next_arrival - clock
            clock = next_arrival
            continue
        chosen = min(ready, key=lambda i: (remaining[i], procs[i].arrival, i))
        starts.setdefault(chosen, clock)
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            del remaining[chosen]
            proc = procs[chosen]
            results.append(
                ProcessResult(
                    pid=proc.pid,
                    arrival=proc.arrival,
                    burst=proc.burst,
                    start=starts[chosen],
                    completion=clock,
                    priority=proc.priority,
                )
            )

    return Schedule(results, idle=idle)
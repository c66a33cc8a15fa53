"""Preemptive priority scheduling."""

from __future__ import annotations

from typing import Iterable

from .models import Process, ProcessResult, Schedule


def preemptive_priority(
    processes: Iterable[Process], higher_is_better: bool = False
) -> Schedule:
    """Run one time unit at a time on the ready process with the best priority.

    By default a lower priority number is better; with ``higher_is_better``
    a higher number wins. Ties go to the earlier arrival, then to the process
    given first. Results are in completion order; idle time counts every unit
    the CPU waited for the next arrival.
    """
    procs = list(processes)
    if not procs:
        raise ValueError("no processes to schedule")
    for proc in procs:
        if proc.burst < 1:
            raise ValueError(f"process {proc.pid} has no work to do")

    sign = -1 if higher_is_better else 1
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
        chosen = min(
            ready, key=lambda i: (sign * procs[i].priority, procs[i].arrival, i)
        )
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
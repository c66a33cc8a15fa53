"""Non-preemptive schedulers: first come first served, shortest job first, priority."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import Process, ProcessResult, Schedule


def _run_in_order(ordered: Sequence[Process]) -> Schedule:
    if not ordered:
        raise ValueError("no processes to schedule")
    results: list[ProcessResult] = []
    clock = 0
    idle = 0
    for proc in ordered:
        start = max(clock, proc.arrival)
        idle += start - clock
        clock = start + proc.burst
        results.append(
            ProcessResult(
                pid=proc.pid,
                arrival=proc.arrival,
                burst=proc.burst,
                start=start,
                completion=clock,
                priority=proc.priority,
            )
        )
    return Schedule(results, idle=idle, origin=0)


def fcfs(processes: Iterable[Process]) -> Schedule:
    """Run processes one after another in the order given."""
    return _run_in_order(list(processes))


def sjf(processes: Iterable[Process]) -> Schedule:
    """Run processes in order of burst time, shortest first; ties keep input order."""
    return _run_in_order(sorted(processes, key=lambda p: p.burst))


def priority_order(processes: Iterable[Process]) -> Schedule:
    """Run processes in order of priority number, lowest first; ties keep input order."""
    return _run_in_order(sorted(processes, key=lambda p: p.priority))
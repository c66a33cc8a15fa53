"""Process descriptions and the per-run scheduling results built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from statistics import fmean
from typing import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class Process:
    """A process waiting to be scheduled."""

    pid: int
    arrival: int
    burst: int
    priority: int = 0


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Timing of one process after it has run to completion."""

    pid: int
    arrival: int
    burst: int
    start: int
    completion: int
    priority: int = 0

    @property
    def turnaround(self) -> int:
        return self.completion - self.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.burst

    @property
    def response(self) -> int:
        return self.start - self.arrival


def make_processes(
    arrivals: Sequence[int],
    bursts: Sequence[int],
    priorities: Sequence[int] | None = None,
) -> list[Process]:
    """Build processes numbered from 1 out of parallel sequences of times."""
    if priorities is None:
        priorities = [0] * len(arrivals)
    if not len(arrivals) == len(bursts) == len(priorities):
        raise ValueError("arrivals, bursts and priorities must have the same length")
    return [
        Process(pid, arrival, burst, priority)
        for pid, (arrival, burst, priority) in enumerate(
            zip(arrivals, bursts, priorities), start=1
        )
    ]


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run: results in completion order plus idle time.

    ``origin`` is the moment throughput is measured from; it defaults to the
    earliest arrival.
    """

    results: tuple[ProcessResult, ...]
    idle: int = 0
    origin: int | None = None
    _empty_message: str = field(default="schedule has no processes", repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))

    def _require_results(self) -> tuple[ProcessResult, ...]:
        if not self.results:
            raise ValueError(self._empty_message)
        return self.results

    @property
    def end(self) -> int:
        """Completion time of the last process to finish."""
        return max(r.completion for r in self._require_results())

    def average_waiting(self) -> float:
        return fmean(r.waiting for r in self._require_results())

    def average_turnaround(self) -> float:
        return fmean(r.turnaround for r in self._require_results())

    def average_response(self) -> float:
        return fmean(r.response for r in self._require_results())

    def cpu_utilization(self) -> float:
        """Percentage of the time up to the last completion the CPU was busy."""
        end = self.end
        if end == 0:
            raise ValueError("schedule ends at time 0")
        return (end - self.idle) / end * 100

    def throughput(self) -> float:
        """Processes completed per unit of time."""
        results = self._require_results()
        origin = self.origin if self.origin is not None else min(r.arrival for r in results)
        span = self.end - origin
        if span == 0:
            raise ValueError("schedule spans no time")
        return len(results) / span

    def by_pid(self) -> list[ProcessResult]:
        return sorted(self.results, key=lambda r: r.pid)

    def table(self) -> str:
        """Tab-separated table of every process, ordered by pid."""
        lines = ["Pid\tAT\tBT\tST\tCT\tTAT\tWT\tRT"]
        lines.extend(
            "\t".join(
                str(value)
                for value in (
                    r.pid,
                    r.arrival,
                    r.burst,
                    r.start,
                    r.completion,
                    r.turnaround,
                    r.waiting,
                    r.response,
                )
            )
            for r in self.by_pid()
        )
        return "\n".join(lines)


def results_from(items: Iterable[ProcessResult]) -> tuple[ProcessResult, ...]:
    """Freeze an iterable of results into the tuple a Schedule stores."""
    return tuple(items)
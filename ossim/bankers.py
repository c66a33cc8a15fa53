"""Banker's algorithm: deadlock avoidance by searching for a safe sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence


class UnsafeStateError(Exception):
    """No order lets every process finish; ``completed`` holds those that could."""

    def __init__(self, completed: Iterable[int]) -> None:
        self.completed = tuple(completed)
        super().__init__("system is in an unsafe state")


def _matrix(rows: Iterable[Iterable[int]]) -> tuple[tuple[int, ...], ...]:
    return tuple(tuple(row) for row in rows)


@dataclass(frozen=True)
class BankersState:
    """Resources held and claimed by each process, and what remains free."""

    allocation: Sequence[Sequence[int]]
    maximum: Sequence[Sequence[int]]
    available: Sequence[int]

    def __post_init__(self) -> None:
        allocation = _matrix(self.allocation)
        maximum = _matrix(self.maximum)
        available = tuple(self.available)
        if len(allocation) != len(maximum):
            raise ValueError("allocation and maximum must list the same processes")
        width = len(available)
        for pid, (held, claim) in enumerate(zip(allocation, maximum)):
            if len(held) != width or len(claim) != width:
                raise ValueError(f"process {pid} does not list {width} resources")
            if any(h > c for h, c in zip(held, claim)):
                raise ValueError(f"process {pid} holds more than its maximum")
        object.__setattr__(self, "allocation", allocation)
        object.__setattr__(self, "maximum", maximum)
        object.__setattr__(self, "available", available)

    def need(self) -> tuple[tuple[int, ...], ...]:
        """What each process may still request: maximum minus allocation."""
        return tuple(
            tuple(c - h for c, h in zip(claim, held))
            for claim, held in zip(self.maximum, self.allocation)
        )

    def _search(self) -> tuple[list[int], bool]:
        needs = self.need()
        work = list(self.available)
        pending = list(range(len(needs)))
        sequence: list[int] = []
        progress = True
        while progress:
            progress = False
            for pid in list(pending):
                if all(n <= w for n, w in zip(needs[pid], work)):
                    work = [w + h for w, h in zip(work, self.allocation[pid])]
                    sequence.append(pid)
                    pending.remove(pid)
                    progress = True
        return sequence, not pending

    def safe_sequence(self) -> list[int]:
        """Process indices in an order in which all can finish.

        Raises UnsafeStateError when no such order exists.
        """
        sequence, safe = self._search()
        if not safe:
            raise UnsafeStateError(sequence)
        return sequence

    def is_safe(self) -> bool:
        return self._search()[1]
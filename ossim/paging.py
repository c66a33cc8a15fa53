"""Page replacement: first in first out and least recently used."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable


@dataclass(frozen=True, slots=True)
class PageStep:
    """One reference and the frame contents after it; empty frames are None."""

    symbol: Hashable
    frames: tuple
    hit: bool


@dataclass(frozen=True)
class PagingResult:
    """Every step of a run, with hit and miss counts."""

    steps: tuple[PageStep, ...]

    @property
    def hits(self) -> int:
        return sum(step.hit for step in self.steps)

    @property
    def misses(self) -> int:
        return len(self.steps) - self.hits


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("at least one frame is required")


def fifo(references: Iterable[Hashable], frames: int) -> PagingResult:
    """Replace the page that was loaded earliest."""
    _check_frames(frames)
    slots: list = [None] * frames
    victim = 0
    steps = []
    for symbol in references:
        hit = symbol in slots
        if not hit:
            slots[victim] = symbol
            victim = (victim + 1) % frames
        steps.append(PageStep(symbol, tuple(slots), hit))
    return PagingResult(tuple(steps))


def lru(references: Iterable[Hashable], frames: int) -> PagingResult:
    """Replace the page whose last use lies furthest back."""
    _check_frames(frames)
    slots: list = [None] * frames
    filled = 0
    last_used: dict = {}
    steps = []
    for time, symbol in enumerate(references):
        hit = filled > 0 and symbol in slots[:filled]
        if not hit:
            if filled < frames:
                slots[filled] = symbol
                filled += 1
            else:
                victim = min(range(frames), key=lambda i: last_used[slots[i]])
                slots[victim] = symbol
        last_used[symbol] = time
        steps.append(PageStep(symbol, tuple(slots), hit))
    return PagingResult(tuple(steps))
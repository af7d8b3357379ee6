"""Greedy algorithms: room bookings, job sequencing, change making and knapsack."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Iterable

__all__ = [
    "Booking",
    "Job",
    "DENOMINATIONS",
    "maximum_bookings",
    "job_sequence",
    "min_notes",
    "fractional_knapsack",
]

DENOMINATIONS = (2000, 500, 100, 50, 20, 10, 5, 2, 1)


@dataclass(frozen=True)
class Booking:
    """A hotel booking from an arrival day to a departure day."""

    arrival: int
    departure: int


@dataclass(frozen=True)
class Job:
    """A unit-time job with a deadline and the profit it earns."""

    id: str
    deadline: int
    profit: int


def maximum_bookings(bookings: Iterable[Booking], rooms: int) -> list[Booking]:
    """Choose bookings, ordered by departure, to keep ``rooms`` rooms in use.

    The booking that departs first is always taken. A later booking is taken
    when it arrives no earlier than the last taken booking departs, or while
    a room is still free.
    """
    if rooms < 1:
        raise ValueError(f"at least one room is needed, got {rooms}")
    ordered = sorted(bookings, key=attrgetter("departure"))
    if not ordered:
        return []
    last = ordered[0]
    chosen = [last]
    free = rooms - 1
    for booking in ordered[1:]:
        after_last = booking.arrival >= last.departure
        if after_last or free > 0:
            chosen.append(booking)
            free -= 1
            last = booking
        if after_last:
            free += 1
    return chosen


def job_sequence(jobs: Iterable[Job]) -> list[Job]:
    """Return the jobs that earn the most profit, in the order they run.

    Jobs are taken by falling profit and placed in the latest free time slot
    before their deadline; jobs with no such slot are dropped.
    """
    ranked = sorted(jobs, key=attrgetter("profit"), reverse=True)
    slots: list[Job | None] = [None] * len(ranked)
    for job in ranked:
        for slot in reversed(range(min(len(ranked), job.deadline))):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job for job in slots if job is not None]


def min_notes(cash: int) -> list[int]:
    """Split ``cash`` into the fewest notes, largest first."""
    if cash < 0:
        raise ValueError(f"cash must not be negative, got {cash}")
    notes: list[int] = []
    for note in DENOMINATIONS:
        count, cash = divmod(cash, note)
        notes.extend([note] * count)
    return notes


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Return the best profit from ``(profit, weight)`` items, allowing fractions."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    pairs = list(items)
    for profit, weight in pairs:
        if weight <= 0:
            raise ValueError(f"item weights must be positive, got {weight}")
    ranked = sorted(pairs, key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    remaining = capacity
    for profit, weight in ranked:
        if weight <= remaining:
            total += profit
            remaining -= weight
        else:
            total += remaining * profit / weight
            break
    return total
"""Data structures for the ward: discharge stack, waiting queue, registry and beds."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from typing import Protocol

from wardsim.patient import Patient

BED_CAPACITY = 10
QUEUE_CAPACITY = 20
TABLE_SIZE = 10

_DJB2_SEED = 5381
_MASK64 = (1 << 64) - 1


class _Rng(Protocol):
    def randrange(self, stop: int) -> int: ...


class StructureError(Exception):
    """Base error for ward structure misuse."""


class BedsFullError(StructureError):
    """Raised when a patient is added to a full ward."""


class BedsEmptyError(StructureError):
    """Raised when a patient is removed from an empty ward."""


class NoDischargeReadyError(StructureError):
    """Raised when no admitted patient is ready for discharge."""


def djb2_hash(key: str, size: int) -> int:
    """Return the DJB2 bucket index of ``key`` in a table of ``size`` buckets."""
    value = _DJB2_SEED
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK64
    return value % size


def _pick(rng: _Rng | None, stop: int) -> int:
    return (rng or random).randrange(stop)


class DischargeStack:
    """Stack of discharged patients, most recent on top."""

    def __init__(self) -> None:
        self._items: list[Patient] = []

    def push(self, patient: Patient) -> None:
        self._items.append(patient)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Patient]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


class WaitingQueue:
    """Double-ended waiting line with a nominal capacity."""

    def __init__(self, capacity: int = QUEUE_CAPACITY) -> None:
        self.capacity = capacity
        self._items: deque[Patient] = deque()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push_front(self, patient: Patient) -> None:
        self._items.appendleft(patient)

    def push_back(self, patient: Patient) -> None:
        self._items.append(patient)

    def pop_front(self) -> Patient:
        if not self._items:
            raise IndexError("pop from an empty waiting queue")
        return self._items.popleft()

    def pop_back(self) -> Patient:
        if not self._items:
            raise IndexError("pop from an empty waiting queue")
        return self._items.pop()

    def pop_by_priority(self) -> Patient:
        """Remove whichever end has the higher priority; ties go to the front."""
        if len(self._items) <= 1:
            return self.pop_front()
        if self._items[0].priority >= self._items[-1].priority:
            return self.pop_front()
        return self.pop_back()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._items)


class PatientTable:
    """Chained hash table of patients keyed by id."""

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self._buckets: list[list[Patient]] = [[] for _ in range(size)]

    def insert(self, patient: Patient) -> None:
        """Insert at the head of the patient's bucket chain."""
        self._buckets[djb2_hash(patient.id, self.size)].insert(0, patient)

    def unattended(self) -> Iterator[Patient]:
        """Yield patients not yet attended, in bucket order."""
        return (patient for patient in self if not patient.attended)

    def draw_unattended(self, rng: _Rng | None = None) -> Patient | None:
        """Return a random unattended patient (the stored object), or None."""
        candidates = list(self.unattended())
        if not candidates:
            return None
        return candidates[_pick(rng, len(candidates))]

    def dump(self) -> str:
        """Render every bucket and its chain as text."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            if not bucket:
                lines.append(f"Indice {index}: null\n")
            else:
                chain = "".join(
                    f"ID: {p.id}, Nome: {p.full_name}] -> " for p in bucket
                )
                lines.append(f"Indice {index}: {chain}NULL\n")
        return "".join(lines)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Patient]:
        for bucket in self._buckets:
            yield from bucket


class Beds:
    """Fixed-capacity list of admitted patients."""

    def __init__(self, capacity: int = BED_CAPACITY) -> None:
        self.capacity = capacity
        self._patients: list[Patient] = []

    def add(self, patient: Patient) -> None:
        if self.is_full():
            raise BedsFullError("all beds are occupied")
        self._patients.append(patient)

    def has_discharge_ready(self) -> bool:
        return any(p.cycles_admitted >= 1 for p in self._patients)

    def increment_cycles(self) -> None:
        for patient in self._patients:
            patient.cycles_admitted += 1

    def is_full(self) -> bool:
        return len(self._patients) >= self.capacity

    def is_empty(self) -> bool:
        return not self._patients

    def _take(self, index: int) -> Patient:
        removed = self._patients[index]
        last = self._patients.pop()
        if index < len(self._patients):
            self._patients[index] = last
        return removed

    def remove_random(self, rng: _Rng | None = None) -> Patient:
        """Remove a random patient; the last patient fills the freed slot."""
        if self.is_empty():
            raise BedsEmptyError("no admitted patients to remove")
        return self._take(_pick(rng, len(self._patients)))

    def remove_random_ready(self, rng: _Rng | None = None) -> Patient:
        """Remove a random patient admitted for at least one cycle."""
        ready = [i for i, p in enumerate(self._patients) if p.cycles_admitted >= 1]
        if not ready:
            raise NoDischargeReadyError("no patient is ready for discharge")
        return self._take(ready[_pick(rng, len(ready))])

    def __len__(self) -> int:
        return len(self._patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)
"""Jump label allocation, a named label table and the loop label stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

MAX_LABEL_NAME = 9


class LabelError(LookupError):
    """Raised for unknown, duplicate or invalid labels and misuse of the loop stack."""


class LabelAllocator:
    """Hands out consecutive label numbers starting from zero."""

    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def next(self) -> int:
        """Return a fresh label number."""
        label = self._count
        self._count += 1
        return label


class LabelTable:
    """Maps label names to addresses, keeping insertion order."""

    def __init__(self) -> None:
        self._entries: dict[str, int] = {}

    def add(self, name: str, address: int) -> None:
        """Record a label; a name may only be added once."""
        if len(name) > MAX_LABEL_NAME:
            raise LabelError(f"label name {name!r} longer than {MAX_LABEL_NAME} characters")
        if name in self._entries:
            raise LabelError(f"label {name!r} already defined")
        self._entries[name] = address

    def address(self, name: str) -> int:
        """Return the address recorded for a label."""
        try:
            return self._entries[name]
        except KeyError:
            raise LabelError(f"label {name!r} not defined") from None

    def remove(self, name: str) -> None:
        """Forget a label."""
        try:
            del self._entries[name]
        except KeyError:
            raise LabelError(f"label {name!r} not defined") from None

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


@dataclass(frozen=True)
class LoopLabels:
    """The labels of one loop: where to continue and where to break to."""

    cond_label: int
    rest_label: int


class LoopStack:
    """Stack of enclosing loops, innermost on top."""

    def __init__(self) -> None:
        self._frames: list[LoopLabels] = []

    def push(self, cond_label: int, rest_label: int) -> LoopLabels:
        """Enter a loop."""
        frame = LoopLabels(cond_label, rest_label)
        self._frames.append(frame)
        return frame

    def pop(self) -> LoopLabels:
        """Leave the innermost loop and return its labels."""
        if not self._frames:
            raise LabelError("loop stack is empty")
        return self._frames.pop()

    def peek(self) -> LoopLabels:
        """Return the innermost loop's labels."""
        if not self._frames:
            raise LabelError("not inside a loop")
        return self._frames[-1]

    def __len__(self) -> int:
        return len(self._frames)
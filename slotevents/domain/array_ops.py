"""Copy-on-write helpers for the fixed-length tuples backing emitter slots."""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

T = TypeVar("T")

NOT_FOUND = -1


def find(source: Sequence[Any], element: Any, offset: int = 0) -> int:
    """Return the index of the first ``element`` at or after *offset*.

    ``None`` never matches, neither as the target nor as a stored value.
    Call again with ``offset = previous + 1`` to walk every occurrence.
    Returns ``NOT_FOUND`` when nothing matches.
    """
    if element is None:
        return NOT_FOUND

    for i in range(max(offset, 0), len(source)):
        existing = source[i]
        if existing is not None and existing == element:
            return i
    return NOT_FOUND


def append(source: Sequence[T], element: T) -> tuple[T, ...]:
    return (*source, element)


def remove_at(source: Sequence[T], index: int) -> tuple[T, ...]:
    if not 0 <= index < len(source):
        raise IndexError(f"index {index} out of range for length {len(source)}")
    return (*source[:index], *source[index + 1 :])

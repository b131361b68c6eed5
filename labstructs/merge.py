"""Merging of several sorted sequences into one."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from labstructs.heap import Heap


def merge_sorted(
    vectors: Sequence[Sequence[Any]], relation: Callable[[Any, Any], bool]
) -> list[Any]:
    """Merge sequences each sorted by ``relation`` into one list sorted by it."""
    heap = Heap(lambda a, b: relation(a[0], b[0]))
    positions = [0] * len(vectors)
    for idx, vector in enumerate(vectors):
        if vector:
            heap.add((vector[0], idx))

    result: list[Any] = []
    while not heap.is_empty():
        value, idx = heap.remove()
        vector = vectors[idx]
        if positions[idx] < len(vector) - 1:
            positions[idx] += 1
            heap.add((vector[positions[idx]], idx))
        result.append(value)
    return result
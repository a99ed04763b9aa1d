"""Cross-corpus interleaving of independently ranked result lists."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def interleave(
    primary: list[T],
    secondary: list[T],
    limit: int,
    primary_run: int = 2,
    secondary_run: int = 1,
) -> list[T]:
    """Merge two ranked lists in a fixed primary:secondary ratio.

    Each round takes up to ``primary_run`` items from ``primary`` and then up
    to ``secondary_run`` from ``secondary``. Once either side runs out the
    other keeps draining until ``limit`` items are collected. Relative order
    within each input is preserved.

    >>> interleave(["P1", "P2", "P3", "P4", "P5", "P6"], ["S1", "S2"], 6)
    ['P1', 'P2', 'S1', 'P3', 'P4', 'S2']
    """
    if limit <= 0:
        return []
    if primary_run < 1 or secondary_run < 1:
        raise ValueError("interleave runs must be at least 1")

    merged: list[T] = []
    p_idx = s_idx = 0

    while len(merged) < limit and (p_idx < len(primary) or s_idx < len(secondary)):
        for _ in range(primary_run):
            if p_idx >= len(primary) or len(merged) >= limit:
                break
            merged.append(primary[p_idx])
            p_idx += 1
        for _ in range(secondary_run):
            if s_idx >= len(secondary) or len(merged) >= limit:
                break
            merged.append(secondary[s_idx])
            s_idx += 1

    return merged


class CrossCorpusMerger:
    def __init__(self, primary_run: int = 2, secondary_run: int = 1) -> None:
        self._primary_run = primary_run
        self._secondary_run = secondary_run

    def merge(self, primary: list[T], secondary: list[T], limit: int) -> list[T]:
        return interleave(primary, secondary, limit, self._primary_run, self._secondary_run)

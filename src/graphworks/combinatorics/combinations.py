"""Minimal-change enumeration of m-subsets of {0..n-1}.

Combinations are visited in decreasing order, from [n-m, ..., n-1] down to
[0, ..., m-1], by a combinatorial odometer: a cursor k walks a single
position down to its "home" value k, then the next non-home position above
it steps down once and everything below is packed densely beneath it.
"""
from __future__ import annotations

from typing import Iterator, Tuple

from graphworks.errors import InvalidCombinationSize

Combination = Tuple[int, ...]


def triangle_number(k: int) -> int:
    """k(k+1)/2: the number of vertex pairs among k+1 vertices."""
    return k * (k + 1) // 2


class CombinationEnumerator:
    """
    Stateful iterator over the m-subsets of {0..n-1}.

    Each call to advance() mutates only this object's index array and cursor.
    `current` is a tuple snapshot, so callers can keep it safely.
    The enumerator is not restartable.
    """

    def __init__(self, n: int, m: int):
        if m < 1 or n <= m:
            raise InvalidCombinationSize(n, m)
        self.n = n
        self.m = m
        self._idx = list(range(n - m, n))
        self._k = 0
        self._started = False
        self._done = False

    @property
    def current(self) -> Combination:
        if not self._started:
            raise RuntimeError("advance() has not been called yet")
        return tuple(self._idx)

    @property
    def exhausted(self) -> bool:
        return self._done

    def advance(self) -> bool:
        """Step to the next combination. Returns False once exhausted."""
        if self._done:
            return False
        if not self._started:
            self._started = True
            return True

        idx = self._idx
        # strictly increasing with idx[-1] == m-1 means [0, ..., m-1]
        if idx[-1] == self.m - 1:
            self._done = True
            return False

        k = self._k
        if idx[k] > k:
            idx[k] -= 1
            return True

        k += 1
        while idx[k] == k:
            k += 1
        idx[k] -= 1
        if idx[k] != k:
            for i in range(k):
                idx[i] = idx[k] - (k - i)
            k = 0
        self._k = k
        return True

    def __iter__(self) -> Iterator[Combination]:
        return self

    def __next__(self) -> Combination:
        if not self.advance():
            raise StopIteration
        return tuple(self._idx)


def enumerate_combinations(n: int, m: int) -> CombinationEnumerator:
    """
    Return an iterator over all C(n, m) combinations in decreasing
    minimal-change order.

    Raises InvalidCombinationSize unless n > m >= 1; nothing is produced
    in that case.
    """
    return CombinationEnumerator(n, m)

"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Iterable, List, Optional, TextIO


class Stacks:
    """Stacks ``a`` and ``b``, each with its top at index 0.

    Every operation that takes effect writes its name on its own line to
    ``out`` (standard output when ``out`` is None) and records it in
    ``operations``.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.out = out
        self.operations: List[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        stream = self.out if self.out is not None else sys.stdout
        stream.write(name + "\n")

    @staticmethod
    def _swap(stack: Deque[int]) -> bool:
        if not stack:
            return False
        if len(stack) > 1:
            stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: Deque[int], step: int) -> bool:
        if not stack:
            return False
        stack.rotate(step)
        return True

    def sa(self) -> None:
        """Swap the top two elements of a."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of b."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a; does nothing when b is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self.a:
            self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def ra(self) -> None:
        """Rotate a so that its top becomes its bottom."""
        if self._rotate(self.a, -1):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate b so that its top becomes its bottom."""
        if self._rotate(self.b, -1):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks forward."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate a so that its bottom becomes its top."""
        if self._rotate(self.a, 1):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate b so that its bottom becomes its top."""
        if self._rotate(self.b, 1):
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks backward."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self._emit("rrr")
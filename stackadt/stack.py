"""A last-in, first-out stack backed by a Python list."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = ["StackEmptyError", "Stack", "format_elem"]


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


def format_elem(elem: Any) -> str:
    """Return the printed form of a single stack element."""
    return f"{elem} "


class Stack:
    """An unbounded LIFO stack."""

    def __init__(self) -> None:
        self._elements: list[Any] = []

    def push(self, elem: Any) -> None:
        """Place ``elem`` on top of the stack."""
        self._elements.append(elem)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._elements:
            raise StackEmptyError("pop from an empty stack")
        return self._elements.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._elements:
            raise StackEmptyError("peek at an empty stack")
        return self._elements[-1]

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def is_empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._elements)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def format(self) -> str:
        """Return the printable listing of the stack, top to bottom."""
        if self.is_empty():
            return "(Stack Empty)\n\n"
        lines = ["Stack contents (top to bottom): \n"]
        lines.extend(format_elem(elem) + "\n" for elem in self)
        lines.append("--- bottom --- \n")
        lines.append("\n")
        return "".join(lines)

    def print_contents(self, file: TextIO | None = None) -> None:
        """Write the listing of the stack to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.format())
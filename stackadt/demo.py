"""Example program that exercises the stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from stackadt.stack import Stack

__all__ = ["run_demo", "main"]


def run_demo(out: TextIO | None = None) -> None:
    """Push 1, 2 and 3 onto a stack, then pop until empty, reporting each step."""
    out = out if out is not None else sys.stdout
    stack: Stack | None = Stack()
    out.write(f"Instance address = {hex(id(stack))}\n")

    out.write("Pushing 1, 2 and 3...\n")
    for value in (1, 2, 3):
        stack.push(value)

    out.write(f"Stack has {len(stack)} elements.\n")

    out.write("Popping until empty...\n")
    while not stack.is_empty():
        out.write(f"{stack.pop()}\n")

    stack = None
    out.write("Instance address = (nil)\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the stack demonstration and return the exit status."""
    parser = argparse.ArgumentParser(description="Demonstrate stack usage.")
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
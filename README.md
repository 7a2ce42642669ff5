# stackadt

A small last-in, first-out stack, a few helpers that read typed values from
a text stream one line at a time, and a short demonstration program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The stack

```python
from stackadt.stack import Stack, StackEmptyError

s = Stack()
s.push(1)
s.push(2)
s.push(3)

len(s)          # 3
s.peek()        # 3, left on the stack
s.pop()         # 3
list(s)         # [2, 1], top to bottom
s.is_empty()    # False
s.clear()
s.is_empty()    # True

try:
    s.pop()
except StackEmptyError:
    print("nothing to pop")
```

The stack has no size limit. `pop()` and `peek()` on an empty stack raise
`StackEmptyError`, a subclass of `IndexError`.

`Stack.format()` returns the contents as text, listed from top to bottom
between a `Stack contents (top to bottom):` header and a `--- bottom ---`
footer, or `(Stack Empty)` when there is nothing on it.
`Stack.print_contents(file)` writes that text to `file`, or to standard
output when `file` is omitted. `format_elem(elem)` gives the text used for a
single element.

## Reading input

`stackadt.console_input` reads one line from a text stream (standard input
when no stream is given) and turns it into a value. The trailing newline is
dropped. Lines are read in chunks of at most 19 characters, the same as
`read_string(20)`. A line that does not fit the expected form raises
`InputFormatError`, a subclass of `ValueError`; reaching the end of the
stream raises `EOFError`.

```python
import io
from stackadt.console_input import (
    read_integer, read_double, read_char, read_string, split_string,
)

read_integer(io.StringIO("-42\n"))      # -42
read_double(io.StringIO("3.5\n"))       # 3.5
read_char(io.StringIO("yes\n"))         # "y", only the first character is kept
read_string(20, io.StringIO("hello\n")) # "hello"

split_string("a;b;c\r\n", 3, ";")       # ["a", "b", "c"]
split_string("a;b", 4, ";")             # ["a", "b", None, None]
```

- `read_integer` accepts an optional leading `-` followed by digits. An
  empty line reads as `0`.
- `read_double` accepts an optional leading `-`, digits and at most one
  `.`. Missing digits on either side of the point read as zero.
- `read_char` returns the first character and raises `InputFormatError` on
  an empty line.
- `read_string(max_chars)` returns up to `max_chars - 1` characters of the
  line. `max_chars` below 1 raises `ValueError`.

Spaces, including trailing ones, are not accepted in numbers.

`split_string(string, n_tokens, delim)` drops one trailing newline and then
one trailing carriage return, and splits on the first character of `delim`.
The result always has `n_tokens` entries, and missing fields come back as
`None`. It raises `ValueError` if there are more fields than `n_tokens`, if
`n_tokens` is below 1, or if `delim` is empty.

## Demo

```
stackadt-demo
```

This creates a stack and prints an identifier for it. It then pushes 1, 2
and 3, reports the size, and pops and prints elements until the stack is
empty. The same steps can be run from Python with
`stackadt.demo.run_demo(out)`, which writes to any text stream, or to
standard output by default. The command takes no options other than
`--help`.
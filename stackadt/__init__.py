"""A last-in, first-out stack, line-based input helpers and a demo program."""

__version__ = "1.0.0"
__all__ = ["console_input", "demo", "stack"]
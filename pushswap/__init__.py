"""Sort integers with two stacks and a small set of stack operations, with string, buffer, list and formatting helpers."""

__version__ = "0.1.0"
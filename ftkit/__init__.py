"""Character, memory, string, conversion, linked-list, printf and line-reading helpers with C library semantics."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "output",
    "strings",
    "convert",
    "linked_list",
    "printf",
    "line_reader",
]
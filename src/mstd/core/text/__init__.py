"""Text primitives."""

from mstd.core.text.strings import (
    concat,
    lowercase,
    repeat,
    text_length,
    text_reverse,
    trim,
    uppercase,
)

__all__ = [
    "concat",
    "repeat",
    "text_length",
    "text_reverse",
    "uppercase",
    "lowercase",
    "trim",
]

"""Itera — the iteration helpers the rest of the core leans on."""

from collections.abc import Iterator


def ensure_traversable(input):
    """Return an iterator over input. Iterators pass through as-is."""
    if isinstance(input, Iterator):
        return input
    return iter(input)


def apply(input, values):
    """Lazily map values() over input."""
    for item in input:
        yield values(item)

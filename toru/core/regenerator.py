"""Regenerator — a re-iterable wrapper around a callable that produces iterables."""

from collections.abc import Iterable, Iterator

from .errors import InvalidResult
from .itera import ensure_traversable

SEQUENCE = 'sequence'
ARRAY = 'array'


def _classify(value):
    """Tag a produced value: live iterator, materialized iterable, or neither."""
    if isinstance(value, Iterator):
        return SEQUENCE
    if isinstance(value, Iterable):
        return ARRAY
    return None


class Regenerator:
    """
    Invokes its source callable every time it is iterated over.

    A generator object can only be consumed once. Wrapping the generator
    *function* (or any callable returning a fresh iterable) instead gives a
    collection that restarts from the top on each pass:

        numbers = Regenerator(lambda: (i * i for i in range(3)))
        list(numbers)  # [0, 1, 4]
        list(numbers)  # [0, 1, 4]

    The source runs again for every pass, side effects included. Sources that
    consume an external resource will consume it again each time.

    Calling the Regenerator directly forwards the arguments to the source and
    returns its raw result, with no iterability check.

    Only results that implement the iterator protocol (__iter__) count as
    iterable. Objects that support just the legacy __getitem__ protocol raise
    InvalidResult, even though iter() would accept them.
    """

    __slots__ = ('_source',)

    def __init__(self, source):
        if not callable(source):
            raise TypeError(f"Regenerator source must be callable, got {type(source).__name__}")
        object.__setattr__(self, '_source', source)

    @property
    def source(self):
        return self._source

    def __iter__(self):
        collection = self._source()
        kind = _classify(collection)
        if kind == SEQUENCE:
            return collection
        if kind == ARRAY:
            return ensure_traversable(collection)
        raise InvalidResult(
            f"source returned a non-iterable {type(collection).__name__}",
            suggestion="the source callable must return an iterable collection",
        )

    def __call__(self, *args, **kwargs):
        return self._source(*args, **kwargs)

    def __setattr__(self, name, value):
        raise AttributeError("Regenerator source cannot be replaced")

    def __delattr__(self, name):
        raise AttributeError("Regenerator source cannot be replaced")

    def __repr__(self):
        return f"Regenerator({self._source!r})"

"""Carry — an immutable single value passed along a chain of functions."""


class Carry:
    """
    Holds one value. do(fn) returns a new Carry with fn(value);
    the original is never touched.

        Carry.with_(3).do(lambda x: x + 1).do(str).result()  # '4'
    """

    __slots__ = ('_current',)

    def __init__(self, current):
        object.__setattr__(self, '_current', current)

    @classmethod
    def with_(cls, current):
        return cls(current)

    def do(self, fn):
        """Apply fn to the held value and wrap the result in a new Carry."""
        return type(self)(fn(self._current))

    def result(self):
        return self._current

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        return f"{type(self).__name__}({self._current!r})"


Flow = Carry


def carry(value):
    """Shortcut for Carry.with_(value)."""
    return Carry.with_(value)

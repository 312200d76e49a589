"""Exceptions raised by toru itself. Errors from user callables pass through untouched."""


class ToruError(Exception):
    """Base exception for errors originating in toru."""

    def __init__(self, message, suggestion=None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self):
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class InvalidResult(ToruError, TypeError):
    """A Regenerator's source returned something that cannot be iterated."""

    pass

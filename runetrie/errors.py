"""Errors raised by runetrie."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """A word or prefix that cannot be read as a sequence of characters."""

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value

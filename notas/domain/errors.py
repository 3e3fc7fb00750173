"""Custom exceptions for the home screen."""

from __future__ import annotations


class InvalidTabError(ValueError):
    """Raised when a tab index outside the Notes/Tasks pair is requested."""

    def __init__(self, index: int):
        super().__init__(f"Unknown tab index: {index}")
        self.index = index

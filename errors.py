"""Exceptions raised by stream pipelines and collectors."""

from typing import Any


class StreamError(Exception):
    """Base class for pipeline errors."""
    pass


class InvalidArgumentError(StreamError, ValueError):
    """Raised when a slicing operation gets out-of-range bounds."""
    pass


class DuplicateKeyError(StreamError, KeyError):
    """Raised when to_map() hits a key collision and has no merge function."""

    def __init__(self, key: Any, existing: Any, new: Any):
        super().__init__(key)
        self.key = key
        self.existing = existing
        self.new = new

    def __str__(self):
        return (
            f"Duplicate key {self.key} "
            f"(attempted merging values {self.existing} and {self.new})"
        )

"""Reading sources: where the classifier's input comes from."""

from .source import (
    InMemoryReadingSource,
    MockReadingSource,
    ReadingSource,
    get_reading_source,
    reset_reading_source,
)

__all__ = [
    "InMemoryReadingSource",
    "MockReadingSource",
    "ReadingSource",
    "get_reading_source",
    "reset_reading_source",
]

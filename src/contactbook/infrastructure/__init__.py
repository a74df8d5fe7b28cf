"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.file_storage import (
    FileContactStorage,
    format_line,
    parse_line,
)
from contactbook.infrastructure.memory_storage import InMemoryContactStorage

__all__ = [
    "FileContactStorage",
    "InMemoryContactStorage",
    "format_line",
    "parse_line",
]

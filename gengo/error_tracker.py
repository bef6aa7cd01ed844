"""A writer wrapper that records the first write failure."""

from __future__ import annotations

from typing import Any


class ErrorTracker:
    """Wraps a writer and remembers its first error instead of raising it.

    Once an error is recorded, further writes do nothing and return 0, so
    callers can write freely and check `error()` once at the end.
    """

    def __init__(self, writer: Any) -> None:
        self.writer = writer
        self._error: Exception | None = None

    def write(self, data: bytes | str) -> int:
        """Write data to the wrapped writer, returning the count written."""
        if self._error is not None:
            return 0
        try:
            written = self.writer.write(data)
        except (OSError, ValueError) as exc:
            self._error = exc
            return 0
        return len(data) if written is None else written

    def error(self) -> Exception | None:
        """Return the first error seen, or None."""
        return self._error
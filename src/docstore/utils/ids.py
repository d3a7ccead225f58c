"""Prefixed sequential identifiers and derived titles"""

from typing import Iterable, Optional


class IdSequence:
    """Monotonic '<PREFIX>-<n>' generator; the first value is '<PREFIX>-1'."""

    def __init__(self, prefix: str, start: int = 0):
        self.prefix = prefix
        self.value = start

    def next(self) -> str:
        self.value += 1
        return f"{self.prefix}-{self.value}"

    def advance_past(self, ids: Iterable[Optional[str]]) -> None:
        """Skip over the numeric suffix of any already-used id with this prefix."""
        head = f"{self.prefix}-"
        for id_ in ids:
            if id_ and id_.startswith(head) and id_[len(head):].isdecimal():
                self.value = max(self.value, int(id_[len(head):]))


def derive_title(content: Optional[str], length: int = 25, untitled: str = "Untitled") -> str:
    """Return the first `length` characters of content, or `untitled` when there is none."""
    if not content:
        return untitled
    return content[:length]

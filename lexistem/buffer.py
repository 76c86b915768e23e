"""
Word buffer used by the stemmer.

A WordBuffer owns a mutable copy of the word being stemmed plus two
positions:

    k  inclusive index of the last character of the working stem
    j  inclusive index of the last character before the most recently
       matched suffix (set by match_suffix)

All reads go through ``at()``, which returns None outside the buffer
instead of raising or wrapping around with a negative index.
"""

from typing import Optional


class WordBuffer:
    """Mutable character buffer with the k/j bookkeeping of the Porter steps."""

    __slots__ = ("_chars", "k", "j")

    def __init__(self, word: str):
        self._chars = list(word)
        self.k = len(self._chars) - 1
        self.j = self.k

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"WordBuffer({self.stem!r}, k={self.k}, j={self.j})"

    def at(self, i: int) -> Optional[str]:
        """Character at position i, or None if i is outside the buffer."""
        if 0 <= i < len(self._chars):
            return self._chars[i]
        return None

    @property
    def last(self) -> Optional[str]:
        """Character at k."""
        return self.at(self.k)

    @property
    def stem(self) -> str:
        """The working stem, chars[0..k]."""
        return "".join(self._chars[:self.k + 1])

    def match_suffix(self, suffix: str) -> bool:
        """
        Check whether the working stem ends with ``suffix``.

        On a match ``j`` is moved to ``k - len(suffix)`` (which is -1 when the
        suffix covers the whole stem). On a mismatch nothing changes.
        """
        start = self.k - len(suffix) + 1
        if start < 0:
            return False
        if "".join(self._chars[start:self.k + 1]) != suffix:
            return False
        self.j = self.k - len(suffix)
        return True

    def apply_suffix(self, replacement: str) -> None:
        """
        Write ``replacement`` after ``j`` and move ``k`` to its last character.

        Must follow a successful match_suffix(). An empty replacement leaves
        ``k == j``, i.e. strips the suffix.
        """
        start = self.j + 1
        end = start + len(replacement)
        if end > len(self._chars):
            self._chars.extend([""] * (end - len(self._chars)))
        self._chars[start:end] = list(replacement)
        self.k = self.j + len(replacement)

    def truncate(self, k: int) -> None:
        """Shrink the working stem so it ends at index ``k``."""
        self.k = max(-1, min(k, self.k))

    def set_last(self, ch: str) -> None:
        """Overwrite the character at k."""
        if 0 <= self.k < len(self._chars):
            self._chars[self.k] = ch

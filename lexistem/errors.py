"""
Exception types raised by lexistem.

The stemmer itself is permissive by default and raises nothing; these are
only raised in strict mode, by configuration loading, and are caught at the
CLI / MCP boundary.
"""

from typing import Optional


class LexistemError(Exception):
    """Base class for all lexistem errors."""


class InvalidWordError(LexistemError, ValueError):
    """A word contains characters outside lowercase ASCII a-z (strict mode)."""

    def __init__(self, word: str, position: Optional[int] = None):
        self.word = word
        self.position = position
        if position is not None:
            msg = f"invalid character {word[position]!r} at position {position} in {word!r}"
        else:
            msg = f"invalid word {word!r}"
        super().__init__(msg)


class ConfigError(LexistemError, ValueError):
    """A configuration value could not be parsed or is out of range."""

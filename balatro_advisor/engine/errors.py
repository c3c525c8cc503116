"""
Exceptions raised by the Balatro advisor engine.
"""


class AdvisorError(Exception):
    """Base class for all advisor errors."""


class InvalidCard(AdvisorError, ValueError):
    """A card was built from a rank, suit or modifier outside the known set."""


class InvalidLevel(AdvisorError, ValueError):
    """A hand level below 1 (or not an integer) was requested."""


class UnknownHandType(AdvisorError, KeyError):
    """A hand type name did not match any known poker hand."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ConfigError(AdvisorError):
    """Configuration could not be loaded or holds invalid values."""

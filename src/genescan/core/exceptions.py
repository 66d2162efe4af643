"""Exception types for genescan.

Fatal errors share the ``GeneScanError`` base so callers can catch the whole
family at the reporting boundary while still telling the kinds apart.
"""

from __future__ import annotations

from pathlib import Path


class GeneScanError(Exception):
    """Base exception for all genescan errors."""

    pass


class ReadError(GeneScanError):
    """The input could not be read in full.

    Attributes:
        path: File that was read.
        expected: Number of characters expected (file size).
        actual: Number of characters obtained.
    """

    def __init__(self, path: Path | str, expected: int, actual: int) -> None:
        self.path = Path(path)
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Could not read the whole file {self.path}: "
            f"got {actual} of {expected} characters"
        )


class InvalidBaseError(GeneScanError, ValueError):
    """A symbol outside the accepted alphabet was found.

    Attributes:
        offset: 0-based position of the first offending symbol.
        symbol: The offending character.
    """

    def __init__(self, offset: int, symbol: str) -> None:
        self.offset = offset
        self.symbol = symbol
        super().__init__(f"Character {symbol!r} at position {offset} is not a base")


class ConfigurationError(GeneScanError, ValueError):
    """Invalid configuration value or file."""

    pass


class RegistryFrozenError(GeneScanError, RuntimeError):
    """Append attempted on a registry that was already handed off."""

    pass


class UnterminatedGeneWarning(UserWarning):
    """A start codon had no in-frame stop codon before the sequence end."""

    def __init__(self, start: int) -> None:
        self.start = start
        super().__init__(f"Start codon at position {start} has no in-frame stop codon")

"""Shared error types for pepsmiles."""

from __future__ import annotations


class PepsmilesError(Exception):
    """Base error type for pepsmiles."""


class InputError(PepsmilesError, ValueError):
    """Raised when user input is invalid or unsupported."""


class EmissionError(PepsmilesError, RuntimeError):
    """Raised when an instruction stream cannot be rendered."""


class FrozenPeptideError(PepsmilesError, RuntimeError):
    """Raised when a frozen peptide is mutated."""


class UnknownResidue(InputError):
    """Raised when a residue code is not in the lookup tables."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"unknown residue found in sequence: {code!r}")


class CrossLinkError(InputError):
    """Base error for cross-link registration and emission."""


class InvalidCrossLink(CrossLinkError):
    """A residue cannot structurally support the cross-link at its position."""

    def __init__(self, position: int, residue, cross_link):
        self.position = position
        self.residue = residue
        self.cross_link = cross_link
        super().__init__(
            f"residue {residue.code3} at position {position} cannot take part in {cross_link}"
        )


class DuplicateCrossLink(CrossLinkError):
    """A position already owns a cross-link."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"position {position} already has a cross-link")


class TooManyCrossLinks(CrossLinkError):
    """The ring-closure marker space is exhausted."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"cannot register more than {limit} cross-links")


class CrossLinkOutOfRange(CrossLinkError):
    """A cross-link endpoint lies outside the sequence."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(
            f"cross-link position {position} is outside the sequence (1..{length})"
        )

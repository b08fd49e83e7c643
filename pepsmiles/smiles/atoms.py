"""Atom and bond primitives for SMILES emission."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..constants import MAX_RING_MARKER
from ..errors import InputError

ORGANIC_SUBSET = frozenset({"B", "C", "N", "O", "P", "S", "F", "Cl", "Br", "I"})
AROMATIC_SUBSET = frozenset({"b", "c", "n", "o", "p", "s"})


class BondOrder(Enum):
    """Bond symbols; ELIDED is an implicit single (or aromatic) bond."""

    ELIDED = ""
    SINGLE = "-"
    DOUBLE = "="
    UP = "/"
    DOWN = "\\"

    @property
    def symbol(self) -> str:
        return self.value


class Configuration(Enum):
    """Tetrahedral configuration, relative to SMILES neighbor order."""

    TH1 = "@"
    TH2 = "@@"


@dataclass(frozen=True)
class Aliphatic:
    symbol: str

    def __post_init__(self):
        if self.symbol not in ORGANIC_SUBSET:
            raise InputError(f"Not an organic-subset element: {self.symbol!r}")

    def to_smiles(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Aromatic:
    symbol: str

    def __post_init__(self):
        if self.symbol not in AROMATIC_SUBSET:
            raise InputError(f"Not an aromatic organic-subset element: {self.symbol!r}")

    def to_smiles(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Bracket:
    """Bracket atom, e.g. ``[C@@H]`` or ``[SeH]``."""

    element: str
    isotope: Optional[int] = None
    configuration: Optional[Configuration] = None
    hcount: Optional[int] = None
    charge: Optional[int] = None
    map_class: Optional[int] = None

    def to_smiles(self) -> str:
        parts = ["["]
        if self.isotope is not None:
            parts.append(str(self.isotope))
        parts.append(self.element)
        if self.configuration is not None:
            parts.append(self.configuration.value)
        if self.hcount:
            parts.append("H" if self.hcount == 1 else f"H{self.hcount}")
        if self.charge:
            sign = "+" if self.charge > 0 else "-"
            magnitude = abs(self.charge)
            parts.append(sign if magnitude == 1 else f"{sign}{magnitude}")
        if self.map_class is not None:
            parts.append(f":{self.map_class}")
        parts.append("]")
        return "".join(parts)


AtomKind = Union[Aliphatic, Aromatic, Bracket]


def format_marker(marker: int) -> str:
    """Render a ring-closure marker: one digit below 10, ``%nn`` above."""
    if not isinstance(marker, int) or isinstance(marker, bool):
        raise InputError(f"Ring marker must be an integer, got {marker!r}")
    if marker < 0 or marker > MAX_RING_MARKER:
        raise InputError(f"Ring marker {marker} outside 0..{MAX_RING_MARKER}")
    if marker < 10:
        return str(marker)
    return f"%{marker}"


# Atoms used by the residue catalog and the backbone
CARBON = Aliphatic("C")
NITROGEN = Aliphatic("N")
OXYGEN = Aliphatic("O")
SULFUR = Aliphatic("S")
AROMATIC_CARBON = Aromatic("c")
AROMATIC_NITROGEN = Aromatic("n")
CARBON_TH1 = Bracket("C", configuration=Configuration.TH1, hcount=1)
CARBON_TH2 = Bracket("C", configuration=Configuration.TH2, hcount=1)
SELENOL_SELENIUM = Bracket("Se", hcount=1)
# pyrrole-type nitrogen of the indole and imidazole rings
AROMATIC_NH = Bracket("n", hcount=1)

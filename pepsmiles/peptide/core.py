"""
Peptide Representation

A :class:`Peptide` is assembled in two phases. While building, cross-links
are registered and the cyclization mode is chosen. :meth:`Peptide.freeze`
then produces an immutable :class:`FrozenPeptide`, the only form the
backbone traversal accepts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ..errors import FrozenPeptideError, InputError
from ..smiles.atoms import NITROGEN, OXYGEN, BondOrder
from ..smiles.follower import Follower
from ..smiles.writer import SmilesWriter
from .crosslinks import CrossLink, CrossLinkRegistry, RegistryEntry
from .cyclization import Cyclization
from .parsing import parse_cross_link, parse_sequence
from .residues import Residue

logger = logging.getLogger(__name__)

_NO_CROSS_LINKS: Mapping[int, RegistryEntry] = {}


def visit(
    sequence: Iterable[Residue],
    follower: Follower,
    cross_links: Optional[Mapping[int, RegistryEntry]] = None,
    cyclization: Cyclization = Cyclization.NONE,
) -> None:
    """
    Walk the atoms and bonds of a peptide.

    Each residue is stitched to the next through its carbonyl carbon; the
    chain is finished according to ``cyclization``. An empty sequence emits
    nothing.

    Args:
        sequence: Residues from N- to C-terminus.
        follower: Instruction sink.
        cross_links: Position -> registry entry lookup (1-based).
        cyclization: Backbone cyclization mode.

    Raises:
        InvalidCrossLink: on the first residue that cannot carry the
            cross-link registered at its position.
    """
    if cross_links is None:
        cross_links = _NO_CROSS_LINKS

    started = False
    for position, residue in enumerate(sequence, start=1):
        if not started:
            # N of the primary amine
            follower.root(NITROGEN)
            cyclization.open_chain(follower)
            started = True
        else:
            # N of the amide bond
            follower.extend(BondOrder.ELIDED, NITROGEN)
        residue.visit(follower, position, cross_links.get(position))
        # carbonyl oxygen, then back to the carbonyl carbon
        follower.extend(BondOrder.DOUBLE, OXYGEN)
        follower.pop(1)

    if started:
        cyclization.close_chain(follower)


def smiles(sequence: Iterable[Residue]) -> str:
    """Create a SMILES string for a linear peptide without cross-links."""
    writer = SmilesWriter()
    visit(sequence, writer)
    return writer.write()


@dataclass(frozen=True)
class FrozenPeptide:
    """Immutable peptide ready for traversal."""

    residues: Tuple[Residue, ...]
    cross_links: Mapping[int, RegistryEntry]
    cyclization: Cyclization = Cyclization.NONE

    def __len__(self) -> int:
        return len(self.residues)

    def visit(self, follower: Follower) -> None:
        logger.debug(
            f"Traversing {len(self.residues)} residue(s), "
            f"{len(set(e.marker for e in self.cross_links.values()))} cross-link(s), "
            f"cyclization={self.cyclization.value}"
        )
        visit(self.residues, follower, self.cross_links, self.cyclization)

    def smiles(self) -> str:
        writer = SmilesWriter()
        self.visit(writer)
        return writer.write()


class Peptide:
    """
    A residue sequence with optional cross-links and cyclization.

    Best practice:
        - Register every cross-link and set the cyclization before calling
          :meth:`smiles` or :meth:`freeze`; the peptide rejects mutation
          afterwards.
        - Discard the peptide after any failed :meth:`add_cross_link`: the
          registry may hold one endpoint of the rejected cross-link.
    """

    def __init__(
        self,
        residues: Iterable[Residue] = (),
        cyclization: Union[Cyclization, str, None] = Cyclization.NONE,
    ):
        self._residues: List[Residue] = list(residues)
        for residue in self._residues:
            if not isinstance(residue, Residue):
                raise InputError(f"Expected Residue, got {type(residue)!r}")
        self._registry = CrossLinkRegistry(length=len(self._residues))
        self._cyclization = Cyclization.from_name(cyclization)
        self._frozen: Optional[FrozenPeptide] = None

    @classmethod
    def from_sequence(
        cls,
        sequence: str,
        cyclization: Union[Cyclization, str, None] = Cyclization.NONE,
    ) -> "Peptide":
        """
        Create a peptide from 1-letter or separated 3-letter codes.

        An unseparated all-caps string is read as 1-letter codes, so ``"ALA"``
        is Ala-Leu-Ala; write ``"Ala"`` for a single alanine.
        """
        return cls(parse_sequence(sequence), cyclization=cyclization)

    @classmethod
    def from_codes(cls, codes: Iterable[str], **kwargs) -> "Peptide":
        """Create a peptide from an iterable of 3-letter codes."""
        return cls([Residue.from_code3(code) for code in codes], **kwargs)

    def __len__(self) -> int:
        return len(self._residues)

    def __repr__(self) -> str:
        return (
            f"Peptide({self.sequence!r}, cross_links={len(self.cross_links)}, "
            f"cyclization={self._cyclization.value!r})"
        )

    @property
    def residues(self) -> Tuple[Residue, ...]:
        return tuple(self._residues)

    @property
    def sequence(self) -> str:
        """Separated 3-letter representation."""
        return "-".join(r.code3 for r in self._residues)

    @property
    def cross_links(self) -> List[CrossLink]:
        return self._registry.cross_links

    @property
    def registry(self) -> CrossLinkRegistry:
        return self._registry

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    @property
    def cyclization(self) -> Cyclization:
        return self._cyclization

    @cyclization.setter
    def cyclization(self, value: Union[Cyclization, str, None]) -> None:
        self._check_mutable()
        self._cyclization = Cyclization.from_name(value)

    def set_cyclization(self, value: Union[Cyclization, str, None]) -> "Peptide":
        self.cyclization = value
        return self

    def add_cross_link(self, cross_link: Union[CrossLink, str]) -> int:
        """
        Register a cross-link and return its ring-closure marker.

        Strings are parsed with :func:`parse_cross_link`, e.g. ``"lan(2,6)"``.
        """
        self._check_mutable()
        if isinstance(cross_link, str):
            cross_link = parse_cross_link(cross_link)
        if not isinstance(cross_link, CrossLink):
            raise InputError(f"Expected CrossLink, got {type(cross_link)!r}")
        return self._registry.register(cross_link)

    def freeze(self) -> FrozenPeptide:
        """Stop accepting changes and return the traversable form."""
        if self._frozen is None:
            self._frozen = FrozenPeptide(
                residues=tuple(self._residues),
                cross_links=self._registry.freeze(),
                cyclization=self._cyclization,
            )
        return self._frozen

    def visit(self, follower: Follower) -> None:
        self.freeze().visit(follower)

    def smiles(self) -> str:
        """Create the SMILES string for this peptide."""
        return self.freeze().smiles()

    def to_mol(self, sanitize: bool = True):
        """Parse the generated SMILES into an RDKit molecule."""
        from ..chem import to_mol

        return to_mol(self.smiles(), sanitize=sanitize)

    def _check_mutable(self) -> None:
        if self._frozen is not None:
            raise FrozenPeptideError("Peptide is frozen; build a new one to change it.")

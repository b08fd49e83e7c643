"""
Residue catalog.

Every residue knows how to walk its own atoms: starting from the backbone
nitrogen, it emits the α carbon and its side chain, returns to the α
carbon, and finishes on the carbonyl carbon. The carbonyl oxygen and the
peptide bond to the next residue are left to the backbone traversal.

Stereo tags are written for the emission order used here (the backbone
nitrogen precedes the α carbon, side chain before carbonyl), so every
recipe must keep that order.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional

from ..constants import (
    AMINO_ACID_1TO3,
    AMINO_ACID_3TO1,
    RESIDUE_CHEBI_IDS,
    RESIDUE_CODE_3_UPPER,
    RESIDUE_NAMES,
    SIDE_CHAIN_MARKERS,
)
from ..errors import InvalidCrossLink, UnknownResidue
from ..smiles.atoms import (
    AROMATIC_CARBON,
    AROMATIC_NH,
    AROMATIC_NITROGEN,
    CARBON,
    CARBON_TH1,
    CARBON_TH2,
    NITROGEN,
    OXYGEN,
    SELENOL_SELENIUM,
    SULFUR,
    BondOrder,
)
from ..smiles.follower import Follower
from .crosslinks import Cystine, Lan, MeLan, RegistryEntry

ELIDED = BondOrder.ELIDED
DOUBLE = BondOrder.DOUBLE

# intra-residue ring markers; closed before the residue walk ends
R1, R2 = SIDE_CHAIN_MARKERS


class Residue(Enum):
    """A single residue, keyed by its 3-letter code."""

    ARG = "Arg"
    HIS = "His"
    LYS = "Lys"
    ASP = "Asp"
    GLU = "Glu"
    SER = "Ser"
    THR = "Thr"
    ASN = "Asn"
    GLN = "Gln"
    GLY = "Gly"
    PRO = "Pro"
    CYS = "Cys"
    SEC = "Sec"
    ALA = "Ala"
    VAL = "Val"
    ILE = "Ile"
    LEU = "Leu"
    MET = "Met"
    PHE = "Phe"
    TYR = "Tyr"
    TRP = "Trp"
    PYL = "Pyl"
    DHA = "Dha"
    DHB = "Dhb"

    @classmethod
    def from_code1(cls, code: str) -> "Residue":
        """Create a residue from a 1-letter code (upper case)."""
        try:
            return cls(AMINO_ACID_1TO3[code])
        except (KeyError, TypeError):
            raise UnknownResidue(code) from None

    @classmethod
    def from_code3(cls, code: str) -> "Residue":
        """Create a residue from a 3-letter code, ignoring case."""
        try:
            return cls(RESIDUE_CODE_3_UPPER[code.upper()])
        except (KeyError, AttributeError):
            raise UnknownResidue(code) from None

    @property
    def code3(self) -> str:
        return self.value

    @property
    def code1(self) -> Optional[str]:
        """1-letter code, or None for the dehydrated residues."""
        return AMINO_ACID_3TO1.get(self.value)

    @property
    def full_name(self) -> str:
        return RESIDUE_NAMES[self.value]

    @property
    def chebi_id(self) -> Optional[int]:
        return RESIDUE_CHEBI_IDS.get(self.value)

    def visit(
        self,
        follower: Follower,
        position: Optional[int] = None,
        cross_link: Optional[RegistryEntry] = None,
    ) -> None:
        """
        Walk the residue atoms, ending on the carbonyl carbon.

        The follower must be positioned on the backbone nitrogen.

        Args:
            follower: Instruction sink.
            position: 1-based position in the sequence; needed to tell the
                endpoints of a lanthionine apart.
            cross_link: Registry entry for this position, if any.

        Raises:
            InvalidCrossLink: the residue cannot carry ``cross_link``.
        """
        if cross_link is None:
            _RECIPES[self](follower)
        elif self is Residue.CYS:
            _visit_bridged_cys(follower, position, cross_link)
        elif self is Residue.THR:
            _visit_bridged_thr(follower, position, cross_link)
        else:
            raise InvalidCrossLink(position, self, cross_link.cross_link)
        # carbonyl carbon
        follower.extend(ELIDED, CARBON)


def _visit_gly(f: Follower) -> None:
    # alpha carbon
    f.extend(ELIDED, CARBON)


def _visit_ala(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.pop(1)


def _visit_pro(f: Follower) -> None:
    # ring closes back onto the backbone nitrogen
    f.join(ELIDED, R1)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    # alpha carbon
    f.extend(ELIDED, CARBON_TH1)
    f.join(ELIDED, R1)


def _visit_val(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.pop(1)
    f.extend(ELIDED, CARBON)
    f.pop(2)


def _visit_leu(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.pop(1)
    f.extend(ELIDED, CARBON)
    f.pop(3)


def _visit_ile(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.pop(1)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.pop(3)


def _visit_met(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, SULFUR)
    f.extend(ELIDED, CARBON)
    f.pop(4)


def _visit_phe(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    for _ in range(5):
        f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.pop(7)


def _visit_tyr(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, OXYGEN)
    f.pop(1)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.pop(7)


def _visit_cys(f: Follower, marker: Optional[int] = None) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, SULFUR)
    if marker is not None:
        f.join(ELIDED, marker)
    f.pop(2)


def _visit_ser(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, OXYGEN)
    f.pop(2)


def _visit_sec(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, SELENOL_SELENIUM)
    f.pop(2)


def _visit_thr(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.pop(1)
    f.extend(ELIDED, OXYGEN)
    f.pop(2)


def _visit_asn(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, OXYGEN)
    f.pop(1)
    f.extend(ELIDED, NITROGEN)
    f.pop(3)


def _visit_gln(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, OXYGEN)
    f.pop(1)
    f.extend(ELIDED, NITROGEN)
    f.pop(4)


def _visit_arg(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, NITROGEN)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, NITROGEN)
    f.pop(1)
    f.extend(ELIDED, NITROGEN)
    f.pop(6)


def _visit_lys(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    for _ in range(4):
        f.extend(ELIDED, CARBON)
    f.extend(ELIDED, NITROGEN)
    f.pop(5)


def _visit_his(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.extend(ELIDED, AROMATIC_NITROGEN)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, AROMATIC_NH)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.pop(6)


def _visit_asp(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, OXYGEN)
    f.pop(1)
    f.extend(ELIDED, OXYGEN)
    f.pop(3)


def _visit_glu(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, OXYGEN)
    f.pop(1)
    f.extend(ELIDED, OXYGEN)
    f.pop(4)


def _visit_trp(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    f.extend(ELIDED, CARBON)
    # pyrrole ring
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.extend(ELIDED, AROMATIC_NH)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R2)
    f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R1)
    # benzene ring
    for _ in range(4):
        f.extend(ELIDED, AROMATIC_CARBON)
    f.join(ELIDED, R2)
    f.pop(10)


def _visit_pyl(f: Follower) -> None:
    f.extend(ELIDED, CARBON_TH2)
    for _ in range(4):
        f.extend(ELIDED, CARBON)
    f.extend(ELIDED, NITROGEN)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, OXYGEN)
    f.pop(1)
    # 4-methyl-pyrroline ring
    f.extend(ELIDED, CARBON_TH1)
    f.join(ELIDED, R1)
    f.extend(ELIDED, CARBON_TH1)
    f.extend(ELIDED, CARBON)
    f.pop(1)
    f.extend(ELIDED, CARBON)
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, NITROGEN)
    f.join(ELIDED, R1)
    f.pop(11)


def _visit_dha(f: Follower) -> None:
    f.extend(ELIDED, CARBON)
    f.extend(DOUBLE, CARBON)
    f.pop(1)


def _visit_dhb(f: Follower) -> None:
    # Z isomer: backbone nitrogen and methyl on the same side
    f.extend(BondOrder.UP, CARBON)
    f.extend(DOUBLE, CARBON)
    f.extend(BondOrder.DOWN, CARBON)
    f.pop(2)


def _visit_bridged_cys(f: Follower, position: Optional[int], entry: RegistryEntry) -> None:
    link = entry.cross_link
    if isinstance(link, Cystine) or (isinstance(link, (Lan, MeLan)) and position == link.a):
        _visit_cys(f, entry.marker)
        return
    raise InvalidCrossLink(position, Residue.CYS, link)


def _visit_bridged_thr(f: Follower, position: Optional[int], entry: RegistryEntry) -> None:
    link = entry.cross_link
    if isinstance(link, Lan) and position == link.b:
        # hydroxyl and methyl are gone: a plain methylene takes the sulfur
        f.extend(ELIDED, CARBON_TH2)
        f.extend(ELIDED, CARBON)
        f.join(ELIDED, entry.marker)
        f.pop(1)
        return
    if isinstance(link, MeLan) and position == link.b:
        # ring bond is written before the methyl branch, so the tag flips
        # to keep the sulfur where the hydroxyl was
        f.extend(ELIDED, CARBON_TH2)
        f.extend(ELIDED, CARBON_TH1)
        f.join(ELIDED, entry.marker)
        f.extend(ELIDED, CARBON)
        f.pop(2)
        return
    raise InvalidCrossLink(position, Residue.THR, link)


_RECIPES: Dict[Residue, Callable[[Follower], None]] = {
    Residue.ARG: _visit_arg,
    Residue.HIS: _visit_his,
    Residue.LYS: _visit_lys,
    Residue.ASP: _visit_asp,
    Residue.GLU: _visit_glu,
    Residue.SER: _visit_ser,
    Residue.THR: _visit_thr,
    Residue.ASN: _visit_asn,
    Residue.GLN: _visit_gln,
    Residue.GLY: _visit_gly,
    Residue.PRO: _visit_pro,
    Residue.CYS: _visit_cys,
    Residue.SEC: _visit_sec,
    Residue.ALA: _visit_ala,
    Residue.VAL: _visit_val,
    Residue.ILE: _visit_ile,
    Residue.LEU: _visit_leu,
    Residue.MET: _visit_met,
    Residue.PHE: _visit_phe,
    Residue.TYR: _visit_tyr,
    Residue.TRP: _visit_trp,
    Residue.PYL: _visit_pyl,
    Residue.DHA: _visit_dha,
    Residue.DHB: _visit_dhb,
}

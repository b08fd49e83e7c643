from .residues import Residue
from .crosslinks import (
    CROSS_LINK_TYPES,
    CrossLink,
    CrossLinkRegistry,
    Cystine,
    Lan,
    MeLan,
    RegistryEntry,
    cross_link_type,
)
from .cyclization import Cyclization
from .parsing import parse_cross_link, parse_cross_links, parse_sequence
from .core import FrozenPeptide, Peptide, smiles, visit

__all__ = [
    "Residue",
    "CROSS_LINK_TYPES",
    "CrossLink",
    "CrossLinkRegistry",
    "Cystine",
    "Lan",
    "MeLan",
    "RegistryEntry",
    "cross_link_type",
    "Cyclization",
    "parse_cross_link",
    "parse_cross_links",
    "parse_sequence",
    "FrozenPeptide",
    "Peptide",
    "smiles",
    "visit",
]

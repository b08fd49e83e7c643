"""pepsmiles - SMILES generation for peptides and lanthipeptides."""

# --- Peptide ---
from .peptide.residues import Residue
from .peptide.crosslinks import CrossLink, CrossLinkRegistry, Cystine, Lan, MeLan
from .peptide.cyclization import Cyclization
from .peptide.core import FrozenPeptide, Peptide, smiles, visit
from .peptide.parsing import parse_cross_link, parse_cross_links, parse_sequence

# --- Emission ---
from .smiles import Follower, InstructionRecorder, SmilesWriter

# --- Infrastructure ---
from .errors import (
    PepsmilesError,
    InputError,
    EmissionError,
    FrozenPeptideError,
    UnknownResidue,
    CrossLinkError,
    InvalidCrossLink,
    DuplicateCrossLink,
    TooManyCrossLinks,
    CrossLinkOutOfRange,
)
from .specs import OPTION_SPECS, OptionSpec
from . import constants

__version__ = "0.1.0"

__all__ = [
    "Residue", "CrossLink", "CrossLinkRegistry", "Cystine", "Lan", "MeLan",
    "Cyclization", "FrozenPeptide", "Peptide", "smiles", "visit",
    "parse_cross_link", "parse_cross_links", "parse_sequence",
    "Follower", "InstructionRecorder", "SmilesWriter",
    "PepsmilesError", "InputError", "EmissionError", "FrozenPeptideError",
    "UnknownResidue", "CrossLinkError", "InvalidCrossLink", "DuplicateCrossLink",
    "TooManyCrossLinks", "CrossLinkOutOfRange",
    "OptionSpec", "OPTION_SPECS",
    "constants",
]

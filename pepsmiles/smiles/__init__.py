from .atoms import (
    AROMATIC_SUBSET,
    ORGANIC_SUBSET,
    Aliphatic,
    Aromatic,
    AtomKind,
    BondOrder,
    Bracket,
    Configuration,
    format_marker,
)
from .follower import Follower, Instruction, InstructionRecorder
from .writer import SmilesWriter

__all__ = [
    "AROMATIC_SUBSET",
    "ORGANIC_SUBSET",
    "Aliphatic",
    "Aromatic",
    "AtomKind",
    "BondOrder",
    "Bracket",
    "Configuration",
    "format_marker",
    "Follower",
    "Instruction",
    "InstructionRecorder",
    "SmilesWriter",
]

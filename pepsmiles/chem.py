"""RDKit helpers for generated SMILES."""

from __future__ import annotations

from rdkit import Chem
from rdkit.Chem import Descriptors, rdMolDescriptors

from .errors import InputError


def to_mol(smiles: str, sanitize: bool = True) -> Chem.Mol:
    """Parse SMILES into an RDKit molecule."""
    mol = Chem.MolFromSmiles(smiles, sanitize=sanitize)
    if mol is None:
        raise InputError(f"Invalid SMILES string: '{smiles}'")
    return mol


def canonical_smiles(smiles: str, isomeric: bool = True) -> str:
    """RDKit canonical form; the empty string stays empty."""
    if not smiles:
        return ""
    return Chem.MolToSmiles(to_mol(smiles), isomericSmiles=isomeric)


def molecular_formula(smiles: str) -> str:
    return rdMolDescriptors.CalcMolFormula(to_mol(smiles))


def exact_mass(smiles: str) -> float:
    """Monoisotopic mass in Da."""
    return float(Descriptors.ExactMolWt(to_mol(smiles)))

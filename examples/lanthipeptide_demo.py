"""
Lanthipeptide Demo

Builds nisin ring A (Ile-Dhb-Ala(S)-Ile-Dha-Leu-Ala(S)) and a small
head-to-tail cyclic peptide, then prints their SMILES and formulas.
"""

from pepsmiles import InvalidCrossLink, Lan, Peptide
from pepsmiles.chem import canonical_smiles, molecular_formula


def main() -> None:
    ring_a = Peptide.from_sequence("I-Dhb-C-I-Dha-L-T")
    marker = ring_a.add_cross_link(Lan(3, 7))
    smi = ring_a.smiles()
    print(f"Nisin ring A (marker {marker}): {smi}")
    print(f"  formula:   {molecular_formula(smi)}")
    print(f"  canonical: {canonical_smiles(smi)}")

    cyclic = Peptide.from_sequence("Gly-Pro-Gly-Pro", cyclization="head-to-tail")
    print(f"cyclo(GPGP): {cyclic.smiles()}")

    bad = Peptide.from_sequence("AGAG")
    bad.add_cross_link("cystine(2,4)")
    try:
        bad.smiles()
    except InvalidCrossLink as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()

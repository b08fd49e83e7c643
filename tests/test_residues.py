"""Tests for pepsmiles/peptide/residues.py: Residue catalog."""

import pytest
from rdkit import Chem
from rdkit.Chem import rdMolDescriptors

from pepsmiles.errors import InvalidCrossLink, UnknownResidue
from pepsmiles.peptide import Cystine, Lan, MeLan, RegistryEntry, Residue, smiles
from pepsmiles.peptide.residues import _RECIPES
from pepsmiles.smiles import InstructionRecorder, SmilesWriter
from pepsmiles.smiles.atoms import NITROGEN

# Free amino acid formulas (neutral form)
FREE_FORMULAS = {
    Residue.ALA: "C3H7NO2",
    Residue.ARG: "C6H14N4O2",
    Residue.ASN: "C4H8N2O3",
    Residue.ASP: "C4H7NO4",
    Residue.CYS: "C3H7NO2S",
    Residue.GLN: "C5H10N2O3",
    Residue.GLU: "C5H9NO4",
    Residue.GLY: "C2H5NO2",
    Residue.HIS: "C6H9N3O2",
    Residue.ILE: "C6H13NO2",
    Residue.LEU: "C6H13NO2",
    Residue.LYS: "C6H14N2O2",
    Residue.MET: "C5H11NO2S",
    Residue.PHE: "C9H11NO2",
    Residue.PRO: "C5H9NO2",
    Residue.SER: "C3H7NO3",
    Residue.THR: "C4H9NO3",
    Residue.TRP: "C11H12N2O2",
    Residue.TYR: "C9H11NO3",
    Residue.VAL: "C5H11NO2",
    Residue.SEC: "C3H7NO2Se",
    Residue.PYL: "C12H21N3O3",
    Residue.DHA: "C3H5NO2",
    Residue.DHB: "C4H7NO2",
}


def _canonical(smi: str) -> str:
    return Chem.MolToSmiles(Chem.MolFromSmiles(smi))


class TestCodes:
    def test_from_code1(self):
        assert Residue.from_code1("Y") is Residue.TYR
        assert Residue.from_code1("U") is Residue.SEC
        assert Residue.from_code1("O") is Residue.PYL

    def test_from_code1_unknown(self):
        with pytest.raises(UnknownResidue) as exc:
            Residue.from_code1("α")
        assert exc.value.code == "α"

    def test_from_code1_is_case_sensitive(self):
        with pytest.raises(UnknownResidue):
            Residue.from_code1("y")

    def test_from_code3(self):
        assert Residue.from_code3("Thr") is Residue.THR
        assert Residue.from_code3("THR") is Residue.THR
        assert Residue.from_code3("dhb") is Residue.DHB

    def test_from_code3_unknown(self):
        with pytest.raises(UnknownResidue):
            Residue.from_code3("Xyz")
        with pytest.raises(UnknownResidue):
            Residue.from_code3(None)

    def test_code_counts(self):
        one_letter = [r for r in Residue if r.code1 is not None]
        assert len(one_letter) == 22
        assert len(list(Residue)) == 24

    def test_dehydro_residues_have_no_code1(self):
        assert Residue.DHA.code1 is None
        assert Residue.DHB.code1 is None
        assert Residue.DHB.full_name == "(Z)-dehydrobutyrine"

    def test_roundtrip_codes(self):
        for residue in Residue:
            assert Residue.from_code3(residue.code3) is residue
            if residue.code1 is not None:
                assert Residue.from_code1(residue.code1) is residue

    def test_chebi(self):
        assert Residue.GLY.chebi_id == 29947
        assert Residue.DHA.chebi_id is None


class TestCatalog:
    def test_every_residue_has_a_recipe(self):
        assert set(_RECIPES) == set(Residue)

    @pytest.mark.parametrize("residue", list(Residue), ids=lambda r: r.code3)
    def test_free_amino_acid_formula(self, residue):
        mol = Chem.MolFromSmiles(smiles([residue]))
        assert mol is not None
        assert rdMolDescriptors.CalcMolFormula(mol) == FREE_FORMULAS[residue]

    @pytest.mark.parametrize("residue", list(Residue), ids=lambda r: r.code3)
    def test_walk_returns_to_alpha_carbon(self, residue):
        # the carbonyl carbon must hang off the alpha carbon, i.e. be bonded
        # to an atom that is itself bonded to the backbone nitrogen
        mol = Chem.MolFromSmiles(smiles([residue]))
        pattern = Chem.MolFromSmarts("[NX3;!$(NC=O)]~[#6]~[CX3](=O)[OX2H1]")
        assert mol.HasSubstructMatch(pattern)

    def test_glycine(self):
        assert smiles([Residue.GLY]) == "NCC(=O)-O"

    def test_alanine(self):
        assert smiles([Residue.ALA]) == "N[C@@H](C)C(=O)-O"

    def test_proline(self):
        assert smiles([Residue.PRO]) == "N1CCC[C@H]1C(=O)-O"

    def test_tryptophan(self):
        assert smiles([Residue.TRP]) == "N[C@@H](Cc1c[nH]c2c1cccc2)C(=O)-O"

    def test_selenocysteine(self):
        assert smiles([Residue.SEC]) == "N[C@@H](C[SeH])C(=O)-O"

    def test_dehydrobutyrine_is_z(self):
        assert smiles([Residue.DHB]) == "N/C(=C\\C)C(=O)-O"
        # methyl and backbone nitrogen cis
        assert _canonical(smiles([Residue.DHB])) == _canonical("C\\C=C(/N)C(=O)O")
        assert _canonical(smiles([Residue.DHB])) != _canonical("C/C=C(/N)C(=O)O")

    @pytest.mark.parametrize(
        "residue, reference",
        [
            (Residue.ALA, "C[C@H](N)C(=O)O"),
            (Residue.SER, "N[C@@H](CO)C(=O)O"),
            (Residue.THR, "C[C@H]([C@@H](C(=O)O)N)O"),
            (Residue.PRO, "C1C[C@H](NC1)C(=O)O"),
            (Residue.CYS, "C([C@@H](C(=O)O)N)S"),
        ],
        ids=lambda v: v.code3 if isinstance(v, Residue) else None,
    )
    def test_l_configuration(self, residue, reference):
        assert _canonical(smiles([residue])) == _canonical(reference)

    def test_visit_ends_on_carbonyl_carbon(self):
        writer = SmilesWriter()
        writer.root(NITROGEN)
        Residue.LEU.visit(writer)
        # alpha carbon sits at index 1, carbonyl carbon is the last atom
        assert writer.current == len(writer) - 1


class TestBridgedResidues:
    def _visit(self, residue, position, entry):
        recorder = InstructionRecorder()
        recorder.root(NITROGEN)
        residue.visit(recorder, position, entry)
        return recorder

    def test_cystine_on_cysteine(self):
        recorder = self._visit(Residue.CYS, 4, RegistryEntry(3, Cystine(4, 9)))
        assert recorder.markers() == [3]

    def test_lan_donor_cysteine(self):
        recorder = self._visit(Residue.CYS, 2, RegistryEntry(5, Lan(2, 6)))
        assert recorder.markers() == [5]

    def test_lan_acceptor_cysteine_fails(self):
        with pytest.raises(InvalidCrossLink) as exc:
            self._visit(Residue.CYS, 6, RegistryEntry(5, Lan(2, 6)))
        assert exc.value.position == 6
        assert exc.value.residue is Residue.CYS

    def test_threonine_under_cystine_fails(self):
        with pytest.raises(InvalidCrossLink):
            self._visit(Residue.THR, 2, RegistryEntry(3, Cystine(2, 5)))

    def test_threonine_as_donor_fails(self):
        with pytest.raises(InvalidCrossLink):
            self._visit(Residue.THR, 2, RegistryEntry(3, MeLan(2, 5)))

    def test_lan_acceptor_drops_hydroxyl_and_methyl(self):
        recorder = self._visit(Residue.THR, 5, RegistryEntry(3, Lan(1, 5)))
        assert recorder.markers() == [3]
        symbols = [atom.to_smiles() for atom in recorder.atoms()]
        assert "O" not in symbols
        assert symbols == ["N", "[C@@H]", "C", "C"]

    def test_melan_acceptor_keeps_methyl(self):
        recorder = self._visit(Residue.THR, 5, RegistryEntry(3, MeLan(1, 5)))
        symbols = [atom.to_smiles() for atom in recorder.atoms()]
        assert symbols == ["N", "[C@@H]", "[C@H]", "C", "C"]

    @pytest.mark.parametrize("residue", [r for r in Residue if r not in (Residue.CYS, Residue.THR)],
                             ids=lambda r: r.code3)
    def test_other_residues_reject_cross_links(self, residue):
        with pytest.raises(InvalidCrossLink) as exc:
            self._visit(residue, 1, RegistryEntry(3, Cystine(1, 2)))
        assert exc.value.residue is residue
        assert isinstance(exc.value.cross_link, Cystine)

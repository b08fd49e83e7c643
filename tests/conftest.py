"""Shared test fixtures for pepsmiles."""

import pytest

from pepsmiles.smiles import InstructionRecorder, SmilesWriter


@pytest.fixture
def writer() -> SmilesWriter:
    return SmilesWriter()


@pytest.fixture
def recorder() -> InstructionRecorder:
    return InstructionRecorder()


@pytest.fixture
def nisin_ring_a() -> str:
    """Ring A of nisin: Ile-Dhb-Ala(S)-Ile-Dha-Leu-Ala(S)."""
    return "I-Dhb-C-I-Dha-L-T"


@pytest.fixture
def peptides_tsv(tmp_path) -> str:
    """Small batch input with one failing record."""
    lines = [
        "id\tsequence\tcross_links\tcyclization\n",
        "# comment line\n",
        "gly2\tGG\n",
        "cyclo\tGG\t\thead-to-tail\n",
        "bridge\tCAAC\tcystine(1,4)\n",
        "bad\tAGAG\tcystine(2,4)\n",
    ]
    path = tmp_path / "peptides.tsv"
    path.write_text("".join(lines), encoding="utf-8")
    return str(path)

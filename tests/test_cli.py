"""Tests for pepsmiles/cli/batch_peptide_smiles.py."""

from pathlib import Path

from pepsmiles.cli.batch_peptide_smiles import (
    PeptideRecord,
    load_done_ids,
    main,
    process_single_peptide,
    read_records,
)
from pepsmiles.constants import CLI_FAILED_FILENAME, CLI_OUTPUT_FILENAME


def _read_table(path: Path) -> dict:
    rows = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        pid, smi = line.split("\t")
        rows[pid] = smi
    return rows


def test_read_records_skips_header_and_comments(peptides_tsv):
    records = read_records(Path(peptides_tsv))
    assert [r.peptide_id for r in records] == ["gly2", "cyclo", "bridge", "bad"]
    assert records[0] == PeptideRecord("gly2", "GG")
    assert records[1].cyclization == "head-to-tail"
    assert records[2].cross_links == "cystine(1,4)"


def test_read_records_skips_malformed(tmp_path):
    path = tmp_path / "in.tsv"
    path.write_text("lonely\nok\tG\n", encoding="utf-8")
    assert read_records(path) == [PeptideRecord("ok", "G")]


def test_process_single_peptide():
    assert process_single_peptide(PeptideRecord("g", "G"), False) == ("g", True, "NCC(=O)-O")
    pid, ok, message = process_single_peptide(PeptideRecord("x", "GXG"), False)
    assert (pid, ok) == ("x", False)
    assert "X" in message


def test_main_writes_outputs(peptides_tsv, tmp_path):
    out_dir = tmp_path / "out"
    main(["--input", peptides_tsv, "--output_dir", str(out_dir)])

    table = _read_table(out_dir / CLI_OUTPUT_FILENAME)
    assert table == {
        "gly2": "NCC(=O)NCC(=O)-O",
        "cyclo": "N0CC(=O)NCC0=O",
        "bridge": "N[C@@H](CS3)C(=O)N[C@@H](C)C(=O)N[C@@H](C)C(=O)N[C@@H](CS3)C(=O)-O",
    }

    failed = (out_dir / CLI_FAILED_FILENAME).read_text(encoding="utf-8")
    assert failed.startswith("bad\t")
    assert "position 2" in failed


def test_main_resume_and_limit(peptides_tsv, tmp_path):
    out_dir = tmp_path / "out"
    main(["--input", peptides_tsv, "--output_dir", str(out_dir), "--limit", "1"])
    assert load_done_ids(out_dir / CLI_OUTPUT_FILENAME) == {"gly2"}

    main(["--input", peptides_tsv, "--output_dir", str(out_dir), "--resume"])
    lines = (out_dir / CLI_OUTPUT_FILENAME).read_text(encoding="utf-8").splitlines()
    assert [line.split("\t")[0] for line in lines] == ["gly2", "cyclo", "bridge"]


def test_main_canonical(peptides_tsv, tmp_path):
    out_dir = tmp_path / "out"
    main(["--input", peptides_tsv, "--output_dir", str(out_dir), "--canonical"])
    table = _read_table(out_dir / CLI_OUTPUT_FILENAME)
    assert "0" not in table["cyclo"]
    assert "1" in table["cyclo"]

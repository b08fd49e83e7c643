#!/usr/bin/env python
"""Compatibility wrapper for pepsmiles.cli.batch_peptide_smiles."""
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pepsmiles.cli.batch_peptide_smiles import main


if __name__ == '__main__':
    main()

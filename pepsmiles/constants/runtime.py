"""Runtime/default constants for emission, parsing and execution settings."""

# Ring-closure markers
# 0 closes a head-to-tail ring, 1-2 are reused by side-chain rings inside a
# single residue, cross-links are numbered from 3 upwards.
HEAD_TO_TAIL_MARKER = 0
SIDE_CHAIN_MARKERS = (1, 2)
FIRST_CROSS_LINK_MARKER = 3
MAX_RING_MARKER = 99            # SMILES ring bonds stop at %99
MAX_CROSS_LINKS = MAX_RING_MARKER - FIRST_CROSS_LINK_MARKER + 1

# Sequence parsing
SEQUENCE_SEPARATORS = ("-", ".", " ", "\t")
CROSS_LINK_LIST_SEPARATOR = ";"

# Batch CLI defaults
CLI_ID_COLUMN = "id"
CLI_OUTPUT_FILENAME = "peptides.smi.tsv"
CLI_FAILED_FILENAME = "failed_peptides.txt"

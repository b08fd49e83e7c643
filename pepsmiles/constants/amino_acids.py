"""
Amino Acid and Residue Constants.

Contains residue code mappings, names and reference identifiers used by
sequence parsing and the residue catalog.
"""

# =============================================================================
# Residue Code Mappings
# =============================================================================

# 1-letter to 3-letter: the standard 20 plus selenocysteine (U) and
# pyrrolysine (O)
AMINO_ACID_1TO3 = {
    'R': 'Arg', 'H': 'His', 'K': 'Lys', 'D': 'Asp', 'E': 'Glu',
    'S': 'Ser', 'T': 'Thr', 'N': 'Asn', 'Q': 'Gln', 'G': 'Gly',
    'P': 'Pro', 'C': 'Cys', 'U': 'Sec', 'A': 'Ala', 'V': 'Val',
    'I': 'Ile', 'L': 'Leu', 'M': 'Met', 'F': 'Phe', 'Y': 'Tyr',
    'W': 'Trp', 'O': 'Pyl',
}

# Reverse mapping: 3-letter to 1-letter
AMINO_ACID_3TO1 = {v: k for k, v in AMINO_ACID_1TO3.items()}

# Dehydrated residues found in lanthipeptides; no 1-letter code
DEHYDRO_RESIDUES = ('Dha', 'Dhb')

# All 3-letter codes accepted by the catalog
RESIDUE_CODES_3 = list(AMINO_ACID_1TO3.values()) + list(DEHYDRO_RESIDUES)

# Upper-case lookup for case-insensitive parsing
RESIDUE_CODE_3_UPPER = {code.upper(): code for code in RESIDUE_CODES_3}

# =============================================================================
# Residue Names
# =============================================================================

RESIDUE_NAMES = {
    'Arg': 'L-arginine',
    'His': 'L-histidine',
    'Lys': 'L-lysine',
    'Asp': 'L-aspartic acid',
    'Glu': 'L-glutamic acid',
    'Ser': 'L-serine',
    'Thr': 'L-threonine',
    'Asn': 'L-asparagine',
    'Gln': 'L-glutamine',
    'Gly': 'glycine',
    'Pro': 'L-proline',
    'Cys': 'L-cysteine',
    'Sec': 'L-selenocysteine',
    'Ala': 'L-alanine',
    'Val': 'L-valine',
    'Ile': 'L-isoleucine',
    'Leu': 'L-leucine',
    'Met': 'L-methionine',
    'Phe': 'L-phenylalanine',
    'Tyr': 'L-tyrosine',
    'Trp': 'L-tryptophan',
    'Pyl': 'L-pyrrolysine',
    'Dha': 'dehydroalanine',
    'Dhb': '(Z)-dehydrobutyrine',
}

# ChEBI entries for the zwitterion/skeletal formula of each residue
RESIDUE_CHEBI_IDS = {
    'Arg': 29952, 'His': 29979, 'Lys': 29967, 'Asp': 29958, 'Glu': 29972,
    'Ser': 29999, 'Thr': 30013, 'Asn': 50347, 'Gln': 30011, 'Gly': 29947,
    'Pro': 50342, 'Cys': 29950, 'Sec': 30000, 'Ala': 46217, 'Val': 30015,
    'Ile': 30009, 'Leu': 30006, 'Met': 16044, 'Phe': 29997, 'Tyr': 46858,
    'Trp': 29954, 'Pyl': 21860,
}

"""Parsing of sequence and cross-link strings."""

from __future__ import annotations

import re
from typing import List

from ..constants import CROSS_LINK_LIST_SEPARATOR, SEQUENCE_SEPARATORS
from ..errors import InputError
from .crosslinks import CrossLink, cross_link_type
from .residues import Residue

_SEPARATOR_PATTERN = re.compile("[" + re.escape("".join(SEQUENCE_SEPARATORS)) + "]+")
_CROSS_LINK_PATTERN = re.compile(
    r"^\s*(?P<kind>[A-Za-z]+)\s*[(:\s]\s*(?P<a>\d+)\s*[,\-\s]\s*(?P<b>\d+)\s*\)?\s*$"
)


def _split_tokens(sequence: str) -> List[str]:
    return [tok for tok in _SEPARATOR_PATTERN.split(sequence) if tok]


def parse_sequence(sequence: str) -> List[Residue]:
    """
    Parse a residue sequence.

    Accepted forms:
        - 1-letter codes, upper case: ``"ACDEF"``.
        - separated codes: ``"Ala-Cys-Dha"``, ``"Ala Cys Dha"``, ``"A.C.D"``;
          1-character tokens are 1-letter codes, the rest 3-letter codes.
        - concatenated 3-letter codes: ``"AlaCysDha"``. A string without
          separators is read this way as soon as it contains a lower-case
          letter.

    Blank input gives an empty sequence.
    """
    text = sequence.strip()
    if not text:
        return []

    tokens = _split_tokens(text)
    if len(tokens) > 1:
        return [
            Residue.from_code1(tok) if len(tok) == 1 else Residue.from_code3(tok)
            for tok in tokens
        ]

    if text.isupper():
        return [Residue.from_code1(ch) for ch in text]

    if len(text) % 3:
        raise InputError(
            f"Cannot split {text!r} into 3-letter codes; use separators or 1-letter codes"
        )
    return [Residue.from_code3(text[i:i + 3]) for i in range(0, len(text), 3)]


def parse_cross_link(text: str) -> CrossLink:
    """
    Parse a cross-link such as ``"Cystine(2,7)"``, ``"lan:3-8"`` or ``"MeLan 4 9"``.

    Positions are 1-based; for lanthionines the first, lower position is
    the cysteine sulfur donor.
    """
    match = _CROSS_LINK_PATTERN.match(text)
    if match is None:
        raise InputError(f"Invalid cross-link specification: {text!r}")
    cls = cross_link_type(match.group("kind"))
    return cls(int(match.group("a")), int(match.group("b")))


def parse_cross_links(text: str) -> List[CrossLink]:
    """Parse a ``;``-separated list of cross-links; blank input gives none."""
    return [
        parse_cross_link(item)
        for item in text.split(CROSS_LINK_LIST_SEPARATOR)
        if item.strip()
    ]

"""
SMILES writer.

Builds an atom arena from a :class:`Follower` walk and renders it as SMILES
text. Atoms are appended in emission order; the current attachment point is
an index into the arena kept on a path stack, so ``pop`` never has to
search the graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..errors import EmissionError
from .atoms import AtomKind, BondOrder, format_marker
from .follower import Follower


@dataclass
class _Node:
    atom: AtomKind
    bond: BondOrder
    children: List[int] = field(default_factory=list)
    rings: List[Tuple[BondOrder, int]] = field(default_factory=list)


class SmilesWriter(Follower):
    """Render a walk as a SMILES string."""

    def __init__(self):
        self._nodes: List[_Node] = []
        self._roots: List[int] = []
        self._path: List[int] = []
        self._open_rings: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def current(self) -> Optional[int]:
        """Arena index of the current atom."""
        return self._path[-1] if self._path else None

    def root(self, atom: AtomKind) -> None:
        self._nodes.append(_Node(atom, BondOrder.ELIDED))
        idx = len(self._nodes) - 1
        self._roots.append(idx)
        self._path = [idx]

    def extend(self, bond: BondOrder, atom: AtomKind) -> None:
        if not self._path:
            raise EmissionError("extend() called before root()")
        self._nodes.append(_Node(atom, bond))
        idx = len(self._nodes) - 1
        self._nodes[self._path[-1]].children.append(idx)
        self._path.append(idx)

    def join(self, bond: BondOrder, marker: int) -> None:
        if not self._path:
            raise EmissionError("join() called before root()")
        label = format_marker(marker)
        current = self._path[-1]
        opener = self._open_rings.pop(marker, None)
        if opener is None:
            self._open_rings[marker] = current
        elif opener == current:
            raise EmissionError(f"ring marker {label} would bond an atom to itself")
        self._nodes[current].rings.append((bond, marker))

    def pop(self, depth: int) -> None:
        if depth < 0 or depth >= len(self._path):
            raise EmissionError(
                f"cannot pop {depth} atom(s) from an emission path of length {len(self._path)}"
            )
        if depth:
            del self._path[-depth:]

    def write(self) -> str:
        """Return the SMILES string for everything emitted so far."""
        if self._open_rings:
            raise EmissionError(f"unclosed ring markers: {sorted(self._open_rings)}")
        return ".".join(self._render(idx) for idx in self._roots)

    def _render(self, root: int) -> str:
        # Explicit stack: peptide backbones nest far deeper than the
        # interpreter's recursion limit.
        out: List[str] = []
        stack: List[Tuple[bool, object]] = [(False, root)]
        while stack:
            is_text, item = stack.pop()
            if is_text:
                out.append(item)
                continue
            node = self._nodes[item]
            out.append(node.bond.symbol)
            out.append(node.atom.to_smiles())
            for bond, marker in node.rings:
                out.append(bond.symbol + format_marker(marker))
            if not node.children:
                continue
            stack.append((False, node.children[-1]))
            for child in reversed(node.children[:-1]):
                stack.append((True, ")"))
                stack.append((False, child))
                stack.append((True, "("))
        return "".join(out)

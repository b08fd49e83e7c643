"""Instruction-sink interface for molecular-graph walks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Union

from .atoms import AtomKind, BondOrder


class Follower(ABC):
    """
    Receives a depth-first walk over a molecular graph.

    The walk is a linear stream: ``root`` starts a component, ``extend``
    appends a bonded atom which becomes current, ``join`` opens or closes a
    ring bond on the current atom and ``pop`` moves the current atom back
    along the emission path.
    """

    @abstractmethod
    def root(self, atom: AtomKind) -> None:
        """Start a new disconnected component."""

    @abstractmethod
    def extend(self, bond: BondOrder, atom: AtomKind) -> None:
        """Bond a new atom to the current atom."""

    @abstractmethod
    def join(self, bond: BondOrder, marker: int) -> None:
        """Open or close ring-closure ``marker`` on the current atom."""

    @abstractmethod
    def pop(self, depth: int) -> None:
        """Retreat ``depth`` atoms along the emission path."""


class Instruction(NamedTuple):
    op: str
    bond: Optional[BondOrder]
    value: Union[AtomKind, int]


class InstructionRecorder(Follower):
    """Follower that keeps the raw instruction stream."""

    def __init__(self):
        self.instructions: List[Instruction] = []

    def root(self, atom: AtomKind) -> None:
        self.instructions.append(Instruction("root", None, atom))

    def extend(self, bond: BondOrder, atom: AtomKind) -> None:
        self.instructions.append(Instruction("extend", bond, atom))

    def join(self, bond: BondOrder, marker: int) -> None:
        self.instructions.append(Instruction("join", bond, marker))

    def pop(self, depth: int) -> None:
        self.instructions.append(Instruction("pop", None, depth))

    def markers(self) -> List[int]:
        """Ring markers in the order they were joined."""
        return [ins.value for ins in self.instructions if ins.op == "join"]

    def atoms(self) -> List[AtomKind]:
        return [ins.value for ins in self.instructions if ins.op in ("root", "extend")]

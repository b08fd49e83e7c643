"""Backbone cyclization modes."""

from __future__ import annotations

from enum import Enum

from ..constants import HEAD_TO_TAIL_MARKER
from ..smiles.atoms import OXYGEN, BondOrder
from ..smiles.follower import Follower
from ..specs import CYCLIZATION_SPEC, normalize_option


class Cyclization(Enum):
    NONE = "none"
    HEAD_TO_TAIL = "head-to-tail"

    @classmethod
    def from_name(cls, name: str | None) -> "Cyclization":
        if isinstance(name, cls):
            return name
        return cls(normalize_option(CYCLIZATION_SPEC, name))

    def open_chain(self, follower: Follower) -> None:
        """Called on the N-terminal nitrogen, right after it is rooted."""
        if self is Cyclization.HEAD_TO_TAIL:
            follower.join(BondOrder.ELIDED, HEAD_TO_TAIL_MARKER)

    def close_chain(self, follower: Follower) -> None:
        """Called on the C-terminal carbonyl carbon."""
        if self is Cyclization.HEAD_TO_TAIL:
            follower.join(BondOrder.ELIDED, HEAD_TO_TAIL_MARKER)
        else:
            # hydroxyl of the free carboxylic acid
            follower.extend(BondOrder.SINGLE, OXYGEN)

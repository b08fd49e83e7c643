"""
Cross-link declarations and the position registry.

A cross-link pairs two 1-based residue positions. Each registered
cross-link gets its own ring-closure marker, shared by both endpoints, so
that the two side chains close one ring bond in the emitted SMILES.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from ..constants import FIRST_CROSS_LINK_MARKER, MAX_CROSS_LINKS, MAX_RING_MARKER
from ..errors import (
    CrossLinkOutOfRange,
    DuplicateCrossLink,
    InputError,
    TooManyCrossLinks,
)
from ..specs import CROSS_LINK_SPEC, normalize_option

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossLink:
    """Base cross-link between positions ``a`` and ``b``."""

    a: int
    b: int

    kind = "cross-link"

    def __post_init__(self):
        for position in (self.a, self.b):
            if not isinstance(position, int) or isinstance(position, bool) or position < 1:
                raise InputError(
                    f"Cross-link positions are 1-based integers, got {position!r}"
                )

    @property
    def positions(self) -> Tuple[int, int]:
        return (self.a, self.b)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.a}, {self.b})"


@dataclass(frozen=True)
class Cystine(CrossLink):
    """Disulfide bridge between two cysteines."""

    kind = "cystine"


@dataclass(frozen=True)
class _Thioether(CrossLink):
    """Cysteine-to-threonine bridge; ``a`` is the cysteine sulfur donor and must come first."""

    def __post_init__(self):
        super().__post_init__()
        if self.a >= self.b:
            raise InputError(
                f"{type(self).__name__} donor position must precede the acceptor, "
                f"got ({self.a}, {self.b})"
            )


@dataclass(frozen=True)
class Lan(_Thioether):
    """Lanthionine bridge."""

    kind = "lan"


@dataclass(frozen=True)
class MeLan(_Thioether):
    """Methyllanthionine bridge."""

    kind = "melan"


CROSS_LINK_TYPES = {cls.kind: cls for cls in (Cystine, Lan, MeLan)}


def cross_link_type(kind: str) -> type:
    """Resolve a cross-link class from a kind name or alias."""
    return CROSS_LINK_TYPES[normalize_option(CROSS_LINK_SPEC, kind)]


class RegistryEntry(NamedTuple):
    marker: int
    cross_link: CrossLink


class CrossLinkRegistry:
    """
    Maps residue positions to their ring-closure marker and cross-link.

    Markers are handed out monotonically from ``FIRST_CROSS_LINK_MARKER``.
    A position owns at most one entry; registering it again fails instead
    of overwriting.

    Args:
        length: Sequence length used to reject out-of-range endpoints.
            ``None`` disables the range check.
    """

    def __init__(self, length: Optional[int] = None):
        self.length = length
        self._entries: Dict[int, RegistryEntry] = {}
        self._next_marker = FIRST_CROSS_LINK_MARKER

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, position: int) -> bool:
        return position in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    @property
    def next_marker(self) -> int:
        return self._next_marker

    @property
    def num_cross_links(self) -> int:
        """Number of successfully registered cross-links."""
        return self._next_marker - FIRST_CROSS_LINK_MARKER

    @property
    def cross_links(self) -> List[CrossLink]:
        """Registered cross-links, ordered by marker."""
        seen = {}
        for entry in self._entries.values():
            seen.setdefault(entry.marker, entry.cross_link)
        return [seen[m] for m in sorted(seen)]

    def register(self, cross_link: CrossLink) -> int:
        """
        Register ``cross_link`` and return its marker.

        Raises:
            TooManyCrossLinks: the marker space is exhausted.
            CrossLinkOutOfRange: an endpoint lies outside the sequence.
            DuplicateCrossLink: an endpoint already owns a cross-link. The
                marker is released, but an endpoint inserted before the
                failing one stays mapped.
        """
        if self._next_marker > MAX_RING_MARKER:
            raise TooManyCrossLinks(MAX_CROSS_LINKS)
        if self.length is not None:
            for position in cross_link.positions:
                if position > self.length:
                    raise CrossLinkOutOfRange(position, self.length)

        marker = self._next_marker
        self._next_marker += 1
        entry = RegistryEntry(marker, cross_link)
        for position in cross_link.positions:
            if position in self._entries:
                self._next_marker -= 1
                raise DuplicateCrossLink(position)
            self._entries[position] = entry

        logger.debug(f"Registered {cross_link} with ring marker {marker}")
        return marker

    def get(self, position: int) -> Optional[RegistryEntry]:
        return self._entries.get(position)

    def freeze(self) -> Mapping[int, RegistryEntry]:
        """Read-only snapshot of the position map."""
        return MappingProxyType(dict(self._entries))

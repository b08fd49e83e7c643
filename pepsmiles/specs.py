"""Option specs for stable user-facing names (cyclization modes, cross-link kinds)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import InputError


@dataclass(frozen=True)
class OptionSpec:
    name: str
    allowed: tuple[str, ...]
    default: Optional[str] = None
    aliases: Mapping[str, str] = field(default_factory=dict)


CYCLIZATION_SPEC = OptionSpec(
    name="cyclization",
    allowed=("none", "head-to-tail"),
    default="none",
    aliases={
        "": "none",
        "linear": "none",
        "head_to_tail": "head-to-tail",
        "headtotail": "head-to-tail",
        "cyclic": "head-to-tail",
    },
)

CROSS_LINK_SPEC = OptionSpec(
    name="cross-link",
    allowed=("cystine", "lan", "melan"),
    aliases={
        "disulfide": "cystine",
        "lanthionine": "lan",
        "methyllanthionine": "melan",
    },
)

OPTION_SPECS: Mapping[str, OptionSpec] = {
    "cyclization": CYCLIZATION_SPEC,
    "cross-link": CROSS_LINK_SPEC,
}


def normalize_option(spec: OptionSpec, value: str | None) -> str:
    if value is None:
        if spec.default is None:
            raise InputError(f"A {spec.name} value is required. Allowed: {list(spec.allowed)}")
        return spec.default
    key = str(value).strip().lower()
    key = spec.aliases.get(key, key)
    if key not in spec.allowed:
        raise InputError(
            f"Unsupported {spec.name}: {value!r}. "
            f"Allowed: {list(spec.allowed)}"
        )
    return key


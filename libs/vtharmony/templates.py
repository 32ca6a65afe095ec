"""Progression template catalog.

Templates are scale-agnostic degree sequences; ``scale`` is only the context
the template is usually heard in; callers realize them against any key/scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import UnknownTemplate


@dataclass(frozen=True)
class ProgressionTemplate:
    name: str
    degrees: Tuple[int, ...]
    scale: str = "major"


# Keyed by Roman-numeral label (1-indexed degrees)
PROGRESSION_TEMPLATES: Mapping[str, ProgressionTemplate] = MappingProxyType(
    {
        # Pop/Rock
        "I-V-vi-IV": ProgressionTemplate("Pop progression", (1, 5, 6, 4)),
        "I-IV-V-I": ProgressionTemplate("Classic cadence", (1, 4, 5, 1)),
        "vi-IV-I-V": ProgressionTemplate("Emotional pop", (6, 4, 1, 5)),
        "I-vi-IV-V": ProgressionTemplate("50s progression", (1, 6, 4, 5)),
        # EDM/House
        "i-VI-III-VII": ProgressionTemplate("Dark house", (1, 6, 3, 7), "minor"),
        "i-VII-VI-VII": ProgressionTemplate("Driving house", (1, 7, 6, 7), "minor"),
        "i-iv-VII-III": ProgressionTemplate("Deep house", (1, 4, 7, 3), "minor"),
        # Jazz/Neo-soul
        "ii-V-I": ProgressionTemplate("Jazz ii-V-I", (2, 5, 1)),
        "I-vi-ii-V": ProgressionTemplate("Jazz turnaround", (1, 6, 2, 5)),
        "IV-iii-vi-ii-V": ProgressionTemplate("Neo-soul", (4, 3, 6, 2, 5)),
        # Cinematic
        "i-VI-i-VII": ProgressionTemplate("Cinematic minor", (1, 6, 1, 7), "minor"),
        "i-iv-v-i": ProgressionTemplate("Minor cadence", (1, 4, 5, 1), "minor"),
        # Trance/Progressive
        "i-VI-VII-i": ProgressionTemplate("Epic trance", (1, 6, 7, 1), "minor"),
    }
)


def get_template(name: str) -> ProgressionTemplate:
    try:
        return PROGRESSION_TEMPLATES[name]
    except (KeyError, TypeError):
        raise UnknownTemplate(name) from None


__all__ = ["ProgressionTemplate", "PROGRESSION_TEMPLATES", "get_template"]

"""Style-driven progression candidates."""

from __future__ import annotations

from typing import Callable, List, Tuple

from vtcore.logging import get_logger, traced

from .generator import (
    generate_basic_progression,
    generate_edm_progression,
    generate_jazz_progression,
    generate_pop_progression,
    generate_trance_progression,
)
from .models import ChordEvent, ProgressionCandidate, StylePrior

logger = get_logger(__name__)

_Generator = Callable[[str, str], List[ChordEvent]]

# (family, energy-profile keywords, [(candidate name, generator, variant)])
GENRE_FAMILIES: Tuple[Tuple[str, Tuple[str, ...], Tuple[Tuple[str, _Generator, str], ...]], ...] = (
    (
        "house",
        ("house", "techno", "edm"),
        (
            ("Dark house", generate_edm_progression, "dark"),
            ("Driving house", generate_edm_progression, "driving"),
            ("Deep house", generate_edm_progression, "deep"),
        ),
    ),
    (
        "trance",
        ("trance", "progressive"),
        (
            ("Epic trance", generate_trance_progression, "epic"),
            ("Uplifting trance", generate_trance_progression, "uplifting"),
        ),
    ),
    (
        "pop",
        ("pop", "indie"),
        (
            ("Pop standard", generate_pop_progression, "standard"),
            ("Emotional pop", generate_pop_progression, "emotional"),
            ("50s pop", generate_pop_progression, "50s"),
        ),
    ),
    (
        "jazz",
        ("jazz", "lofi", "neo-soul"),
        (
            ("Jazz ii-V-I", generate_jazz_progression, "ii-V-I"),
            ("Jazz turnaround", generate_jazz_progression, "turnaround"),
        ),
    ),
)

BRIGHT_KEYWORDS = ("happy", "uplifting", "bright")


def matching_families(energy_profile: str) -> List[str]:
    """Names of the genre families whose keywords appear in ``energy_profile``."""
    profile = energy_profile.lower()
    return [
        family
        for family, keywords, _ in GENRE_FAMILIES
        if any(keyword in profile for keyword in keywords)
    ]


def generate_progression_candidates(
    style_prior: StylePrior,
    key: str = "C",
    max_count: int = 5,
) -> List[ProgressionCandidate]:
    """Build up to ``max_count`` progression candidates for a style.

    Every family whose keywords occur in the energy profile contributes its
    candidates in catalog order. With no matching family a single basic
    I-IV-V-I candidate is returned, in major for bright profiles and minor
    otherwise.
    """
    if max_count <= 0:
        return []

    profile = style_prior.guardrails.energy_profile.lower()
    with traced("vtharmony.generate_progression_candidates", energy_profile=profile, key=key):
        families = matching_families(profile)

        candidates: List[ProgressionCandidate] = []
        for family, _, entries in GENRE_FAMILIES:
            if family not in families:
                continue
            for name, generate, variant in entries:
                candidates.append(
                    ProgressionCandidate(name=name, progression=generate(key, variant))
                )

        if not candidates:
            scale = "major" if any(word in profile for word in BRIGHT_KEYWORDS) else "minor"
            candidates.append(
                ProgressionCandidate(
                    name=f"Basic I-IV-V-I ({scale})",
                    progression=generate_basic_progression(key, scale),
                )
            )

        logger.debug(
            f"Energy profile {profile!r} matched families {families}",
            extra={
                "energy_profile": profile,
                "families": families,
                "candidate_count": min(len(candidates), max_count),
            },
        )
    return candidates[:max_count]


__all__ = ["GENRE_FAMILIES", "matching_families", "generate_progression_candidates"]

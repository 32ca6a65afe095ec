import os
import sys

import pytest

# Ensure libs are importable in tests without installing the project
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
LIBS = os.path.join(ROOT, "libs")
if LIBS not in sys.path:
    sys.path.insert(0, LIBS)

from vtharmony.models import Guardrails, StylePrior  # noqa: E402
from vtmotif.models import MotifSeed, Note  # noqa: E402


def make_notes(pitches, start_time=0.0, duration=0.5, velocity=100):
    """Evenly spaced notes, one per pitch."""
    return [
        Note(pitch=pitch, time=start_time + i * duration, duration=duration, velocity=velocity)
        for i, pitch in enumerate(pitches)
    ]


def make_motif(**overrides):
    fields = {
        "id": "test-motif",
        "type": "melodic",
        "name": "Test Motif",
        "notes": make_notes([60, 62, 64, 65, 67]),
        "length_bars": 1,
        "key": "C",
        "scale": "major",
        "description": "Test motif",
    }
    fields.update(overrides)
    return MotifSeed(**fields)


def make_style_prior(energy_profile="driving house"):
    return StylePrior(
        bpm_signature={"typical": 128, "variance": 5},
        swing_profile={"amount": 0, "subdivision": "8th"},
        arrangement_norms={
            "typical_intro_length": 8,
            "typical_drop_length": 16,
            "typical_breakdown_length": 8,
            "transition_style": ["riser"],
        },
        guardrails=Guardrails(energy_profile=energy_profile),
    )


@pytest.fixture
def style_prior():
    return make_style_prior()


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are memoized; clear them around every test."""
    from vtcore.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

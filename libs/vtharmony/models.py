"""Value models shared by the harmony generators and the motif scorers."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChordEvent(BaseModel):
    """One timed chord in a progression."""

    model_config = ConfigDict(frozen=True)

    start_beat: float = Field(..., ge=0.0)
    chord: str = Field(..., min_length=1, description="Root + quality, e.g. 'F#min'")
    duration: float = Field(..., gt=0.0, description="Length in beats")

    @property
    def end_beat(self) -> float:
        return self.start_beat + self.duration


class ProgressionCandidate(BaseModel):
    """A named progression offered for ranking."""

    model_config = ConfigDict(frozen=True)

    name: str
    progression: List[ChordEvent]


class MoodAnalysis(BaseModel):
    """Coarse emotional read of a progression."""

    model_config = ConfigDict(frozen=True)

    mood: Literal["dark", "bright", "neutral"]
    tension: float = Field(..., ge=0.0, le=100.0)


class BpmSignature(BaseModel):
    model_config = ConfigDict(frozen=True)

    typical: float = Field(..., gt=0.0)
    variance: float = Field(default=0.0, ge=0.0, description="Acceptable BPM variance")


class SwingProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(default=0.0, ge=0.0, le=100.0)
    subdivision: Literal["8th", "16th"] = "8th"


class ArrangementNorms(BaseModel):
    model_config = ConfigDict(frozen=True)

    typical_intro_length: int = Field(default=8, ge=0, description="Bars")
    typical_drop_length: int = Field(default=16, ge=0)
    typical_breakdown_length: int = Field(default=8, ge=0)
    transition_style: List[str] = Field(default_factory=list)


class Guardrails(BaseModel):
    model_config = ConfigDict(frozen=True)

    energy_profile: str = Field(..., description="Overall energy description, e.g. 'driving house'")
    avoid_cliches: List[str] = Field(default_factory=list)


class StylePrior(BaseModel):
    """Target-genre profile used to bias generation and scoring.

    Only ``guardrails.energy_profile`` is read by the engine; the other
    fields pass through for the caller.
    """

    model_config = ConfigDict(frozen=True)

    bpm_signature: BpmSignature
    swing_profile: SwingProfile = Field(default_factory=SwingProfile)
    sound_design_traits: List[str] = Field(default_factory=list)
    arrangement_norms: ArrangementNorms = Field(default_factory=ArrangementNorms)
    guardrails: Guardrails


__all__ = [
    "ChordEvent",
    "ProgressionCandidate",
    "MoodAnalysis",
    "BpmSignature",
    "SwingProfile",
    "ArrangementNorms",
    "Guardrails",
    "StylePrior",
]

"""Motif and score-report value models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vtharmony.chord_utils import get_scale_pattern, note_name_to_offset


class Note(BaseModel):
    """Single motif note. Times and durations are in beats."""

    model_config = ConfigDict(frozen=True)

    pitch: int = Field(..., ge=0, le=127, description="MIDI pitch, 60 = middle C")
    time: float = Field(..., ge=0.0, description="Onset from motif start")
    duration: float = Field(..., gt=0.0)
    velocity: int = Field(default=100, ge=0, le=127)

    @property
    def end(self) -> float:
        return self.time + self.duration


class MotifSeed(BaseModel):
    """A short melodic or rhythmic idea in a tonal context."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str = Field(default="melodic", description="melodic, rhythmic, harmonic, textural, ...")
    notes: List[Note] = Field(default_factory=list)
    length_bars: int = Field(default=1, ge=1)
    key: str = "C"
    scale: str = "major"
    description: str = ""

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        value = value.strip()
        note_name_to_offset(value)
        return value

    @field_validator("scale")
    @classmethod
    def validate_scale(cls, value: str) -> str:
        get_scale_pattern(value)
        return value


class MotifBreakdown(BaseModel):
    """Raw analyzer outputs, kept for explaining a score."""

    model_config = ConfigDict(frozen=True)

    interval_variety: float
    rhythmic_interest: float
    contour: float
    repetition_balance: float


class MotifScoreReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    motif_id: str
    memorability: float = Field(..., ge=0.0, le=100.0)
    singability: float = Field(..., ge=0.0, le=100.0)
    tension_relief: float = Field(..., ge=0.0, le=100.0)
    novelty: float = Field(..., ge=0.0, le=100.0)
    genre_fit: float = Field(..., ge=0.0, le=100.0)
    overall: float = Field(..., ge=0.0, le=100.0)
    breakdown: MotifBreakdown


class ScoreWeights(BaseModel):
    """Relative weight of each sub-score in the overall score."""

    model_config = ConfigDict(frozen=True)

    memorability: float = Field(default=0.25, ge=0.0)
    singability: float = Field(default=0.20, ge=0.0)
    tension_relief: float = Field(default=0.20, ge=0.0)
    novelty: float = Field(default=0.15, ge=0.0)
    genre_fit: float = Field(default=0.20, ge=0.0)

    @model_validator(mode="after")
    def check_total(self) -> "ScoreWeights":
        if self.total <= 0:
            raise ValueError("at least one score weight must be positive")
        return self

    @property
    def total(self) -> float:
        return (
            self.memorability
            + self.singability
            + self.tension_relief
            + self.novelty
            + self.genre_fit
        )


__all__ = ["Note", "MotifSeed", "MotifBreakdown", "MotifScoreReport", "ScoreWeights"]

"""
Pydantic Validated Models
=========================
Validation layer for cycle configurations coming from outside the process
(JSON files, CLI options, the Streamlit settings form).

Usage:
    from shiftcal.models.validated import ValidatedCycleConfig

    cfg = ValidatedCycleConfig(base_date="2025-07-15", cycle_length=4, shift_table={...})
    config = cfg.to_dataclass()
"""
from datetime import date
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import REFERENCE_BASE_DATE, REFERENCE_SHIFT_TABLE, ShiftCycleConfig
from .shift import TEAM_ORDER, ShiftLabel, TeamId


def _reference_table() -> Dict[TeamId, List[ShiftLabel]]:
    return {team: list(seq) for team, seq in REFERENCE_SHIFT_TABLE.items()}


class ValidatedCycleConfig(BaseModel):
    """
    Pydantic-validated shift cycle configuration.

    Use this for strict validation at input boundaries.
    Can be converted to/from the dataclass ShiftCycleConfig.
    """
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    base_date: date = Field(default=REFERENCE_BASE_DATE, description="Day 0 of the rotation")
    cycle_length: int = Field(default=4, ge=1, le=366, description="Days in one rotation")
    shift_table: Dict[TeamId, List[ShiftLabel]] = Field(default_factory=_reference_table)

    @field_validator("shift_table", mode="before")
    @classmethod
    def parse_labels(cls, v):
        """Accept team and shift aliases (``1``, ``一队``, ``休`` ...)."""
        if not isinstance(v, dict):
            return v
        parsed = {}
        for team, seq in v.items():
            team_id = TeamId.from_string(team)
            if team_id in parsed:
                raise ValueError(f"Duplicate shift sequence for {team_id.value} (key {team!r})")
            if isinstance(seq, (list, tuple)):
                seq = [ShiftLabel.from_string(s) for s in seq]
            parsed[team_id] = seq
        return parsed

    @model_validator(mode="after")
    def validate_model(self):
        """Cross-field validation."""
        missing = [t.value for t in TEAM_ORDER if t not in self.shift_table]
        if missing:
            raise ValueError(f"shift_table is missing team(s): {', '.join(missing)}")
        for team, seq in self.shift_table.items():
            if len(seq) != self.cycle_length:
                raise ValueError(
                    f"{team.value} has {len(seq)} entries, expected cycle_length={self.cycle_length}"
                )
        return self

    def to_dataclass(self) -> ShiftCycleConfig:
        """Convert to the immutable ShiftCycleConfig used by the calculator."""
        return ShiftCycleConfig(
            base_date=self.base_date,
            cycle_length=self.cycle_length,
            shift_table={team: tuple(seq) for team, seq in self.shift_table.items()},
        )

    @classmethod
    def from_dataclass(cls, config: ShiftCycleConfig) -> "ValidatedCycleConfig":
        return cls(
            base_date=config.base_date,
            cycle_length=config.cycle_length,
            shift_table={team: list(seq) for team, seq in config.shift_table.items()},
        )

"""Shift cycle configuration."""
from dataclasses import dataclass, fields, replace
from datetime import date
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .dates import to_date
from .errors import InvalidDateError, MalformedConfigError, ShiftCalendarError, UnknownTeamError
from .rules import check_color_totality
from .shift import TEAM_ORDER, ShiftLabel, TeamId

# Keys accepted by ShiftCycleConfig.merged besides the field names
FIELD_ALIASES = {
    "baseDate": "base_date",
    "cycleLength": "cycle_length",
    "cycleDays": "cycle_length",
    "cycle_days": "cycle_length",
    "shiftTable": "shift_table",
}


def _normalize_table(table: Mapping) -> Dict[TeamId, Tuple[ShiftLabel, ...]]:
    normalized = {}
    for team, sequence in table.items():
        try:
            team_id = TeamId.from_string(team)
            labels = tuple(ShiftLabel.from_string(s) for s in sequence)
        except (ShiftCalendarError, ValueError, TypeError) as e:
            raise MalformedConfigError(f"Invalid shift table entry for {team!r}: {e}") from e
        if team_id in normalized:
            raise MalformedConfigError(f"Duplicate shift sequence for {team_id.value}")
        normalized[team_id] = labels
    return normalized


@dataclass(frozen=True)
class ShiftCycleConfig:
    """
    Rotation configuration: base date, cycle length and per-team sequences.

    ``shift_table[team][i]`` is the team's shift on the i-th day of the
    cycle, day 0 being ``base_date``. Instances are immutable and validated
    on construction; use :meth:`merged` to derive a new configuration.
    """
    base_date: date
    cycle_length: int
    shift_table: Mapping[TeamId, Tuple[ShiftLabel, ...]]

    def __post_init__(self):
        try:
            base = to_date(self.base_date)
        except InvalidDateError as e:
            raise MalformedConfigError(f"Invalid base date: {self.base_date!r}") from e

        length = self.cycle_length
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise MalformedConfigError(f"cycle_length must be an integer >= 1, got {length!r}")

        if not isinstance(self.shift_table, Mapping):
            raise MalformedConfigError("shift_table must be a mapping of team -> sequence")
        table = _normalize_table(self.shift_table)

        missing = [t.value for t in TEAM_ORDER if t not in table]
        if missing:
            raise MalformedConfigError(f"Missing shift sequence for: {', '.join(missing)}")
        for team in TEAM_ORDER:
            if len(table[team]) != length:
                raise MalformedConfigError(
                    f"{team.value} has {len(table[team])} entries, expected cycle_length={length}"
                )
        check_color_totality({label for seq in table.values() for label in seq})

        ordered = {team: table[team] for team in TEAM_ORDER}
        object.__setattr__(self, "base_date", base)
        object.__setattr__(self, "shift_table", MappingProxyType(ordered))

    @property
    def teams(self) -> List[TeamId]:
        return list(self.shift_table)

    def labels(self) -> List[ShiftLabel]:
        """Distinct labels the table can produce, in ShiftLabel order."""
        used = {label for seq in self.shift_table.values() for label in seq}
        return [label for label in ShiftLabel if label in used]

    def sequence(self, team) -> Tuple[ShiftLabel, ...]:
        """Shift sequence of ``team``; raises UnknownTeamError."""
        team_id = TeamId.from_string(team)
        if team_id not in self.shift_table:
            raise UnknownTeamError(team)
        return self.shift_table[team_id]

    def cycle_days(self) -> List[Dict[TeamId, ShiftLabel]]:
        """Day-of-cycle view: ``cycle_days()[i][team]`` equals ``shift_table[team][i]``."""
        return [
            {team: seq[i] for team, seq in self.shift_table.items()}
            for i in range(self.cycle_length)
        ]

    def merged(self, partial: Optional[Mapping] = None, **changes) -> "ShiftCycleConfig":
        """
        New config with the given fields replaced (shallow merge).

        When only ``cycle_length`` changes, to a multiple of the current
        length, every sequence is repeated to the new length.
        """
        updates = {}
        for key, value in {**dict(partial or {}), **changes}.items():
            name = FIELD_ALIASES.get(key, key)
            if name not in _FIELD_NAMES:
                raise MalformedConfigError(f"Unknown config field: {key!r}")
            updates[name] = value

        new_length = updates.get("cycle_length", self.cycle_length)
        if (
            "shift_table" not in updates
            and isinstance(new_length, int)
            and new_length != self.cycle_length
            and new_length > 0
            and new_length % self.cycle_length == 0
        ):
            repeat = new_length // self.cycle_length
            updates["shift_table"] = {t: seq * repeat for t, seq in self.shift_table.items()}

        return replace(self, **updates)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "base_date": self.base_date.isoformat(),
            "cycle_length": self.cycle_length,
            "shift_table": {
                team.value: [label.value for label in seq]
                for team, seq in self.shift_table.items()
            },
        }

    @classmethod
    def from_dict(cls, d: Mapping) -> "ShiftCycleConfig":
        """Create from dictionary; missing fields come from the reference config."""
        return default_cycle_config().merged(d)


_FIELD_NAMES = {f.name for f in fields(ShiftCycleConfig)}

# Rotation the reference configuration starts from on its base date
REFERENCE_BASE_DATE = date(2025, 7, 15)
REFERENCE_SHIFT_TABLE: Dict[TeamId, Sequence[ShiftLabel]] = {
    TeamId.TEAM1: (ShiftLabel.REST, ShiftLabel.DAY, ShiftLabel.NIGHT, ShiftLabel.MORNING),
    TeamId.TEAM2: (ShiftLabel.MORNING, ShiftLabel.REST, ShiftLabel.DAY, ShiftLabel.NIGHT),
    TeamId.TEAM3: (ShiftLabel.DAY, ShiftLabel.NIGHT, ShiftLabel.MORNING, ShiftLabel.REST),
    TeamId.TEAM4: (ShiftLabel.NIGHT, ShiftLabel.MORNING, ShiftLabel.REST, ShiftLabel.DAY),
}


def default_cycle_config() -> ShiftCycleConfig:
    """Reference four-team, four-day rotation."""
    return ShiftCycleConfig(
        base_date=REFERENCE_BASE_DATE,
        cycle_length=4,
        shift_table=dict(REFERENCE_SHIFT_TABLE),
    )

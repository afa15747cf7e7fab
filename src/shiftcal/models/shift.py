"""Shift label and team definitions."""
from dataclasses import dataclass
from enum import Enum

from .errors import UnknownTeamError


class ShiftLabel(str, Enum):
    """Kinds of duty a team can have on a given day."""
    REST = "rest"
    MORNING = "morning"
    DAY = "day"
    NIGHT = "night"

    @property
    def is_work(self) -> bool:
        """True if this is a working shift (not rest)."""
        return self is not ShiftLabel.REST

    @classmethod
    def from_string(cls, s) -> "ShiftLabel":
        """Parse shift from English names or the original Chinese labels."""
        if isinstance(s, cls):
            return s
        mapping = {
            "rest": cls.REST, "off": cls.REST, "休": cls.REST,
            "morning": cls.MORNING, "m": cls.MORNING, "早班": cls.MORNING,
            "day": cls.DAY, "d": cls.DAY, "白班": cls.DAY,
            "night": cls.NIGHT, "n": cls.NIGHT, "夜班": cls.NIGHT,
        }
        key = str(s).strip().lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown shift label: {s!r}")


class TeamId(str, Enum):
    """The fixed set of rotating teams, in canonical order."""
    TEAM1 = "Team1"
    TEAM2 = "Team2"
    TEAM3 = "Team3"
    TEAM4 = "Team4"

    @property
    def number(self) -> int:
        return TEAM_ORDER.index(self) + 1

    @classmethod
    def from_string(cls, s) -> "TeamId":
        """Parse team from ``Team1``, ``1``, ``t1`` or ``一队`` style input."""
        if isinstance(s, cls):
            return s
        key = str(s).strip().lower().replace(" ", "")
        if key in TEAM_ALIASES:
            return TEAM_ALIASES[key]
        raise UnknownTeamError(s)


TEAM_ORDER = list(TeamId)

TEAM_ALIASES = {}
for _n, _cn, _team in zip("1234", "一二三四", TEAM_ORDER):
    TEAM_ALIASES.update({
        f"team{_n}": _team,
        f"t{_n}": _team,
        _n: _team,
        f"{_cn}队": _team,
    })


@dataclass(frozen=True)
class ShiftAssignment:
    """Shift computed for one team on one date."""
    team: TeamId
    shift: ShiftLabel

    def to_dict(self) -> dict:
        return {"team": self.team.value, "shift": self.shift.value}

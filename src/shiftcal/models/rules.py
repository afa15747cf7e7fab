"""
Display Rules and Constants
===========================
Central source of truth for shift colors and calendar UI defaults.
"""
from dataclasses import dataclass
from typing import Dict, Iterable

from .errors import MalformedConfigError
from .shift import ShiftLabel, TeamId


@dataclass(frozen=True)
class ShiftStyle:
    label: ShiftLabel
    display_name: str
    color: str        # Named color scale (badges)
    color_hex: str    # Detailed color scale (cards, exports)


SHIFT_STYLES: Dict[ShiftLabel, ShiftStyle] = {
    ShiftLabel.MORNING: ShiftStyle(ShiftLabel.MORNING, "Morning", "blue", "#1890ff"),
    ShiftLabel.DAY: ShiftStyle(ShiftLabel.DAY, "Day", "green", "#52c41a"),
    ShiftLabel.NIGHT: ShiftStyle(ShiftLabel.NIGHT, "Night", "purple", "#722ed1"),
    ShiftLabel.REST: ShiftStyle(ShiftLabel.REST, "Rest", "gray", "#d9d9d9"),
}

SHIFT_COLORS: Dict[ShiftLabel, str] = {k: s.color for k, s in SHIFT_STYLES.items()}
DETAILED_SHIFT_COLORS: Dict[ShiftLabel, str] = {k: s.color_hex for k, s in SHIFT_STYLES.items()}


def check_color_totality(labels: Iterable[ShiftLabel]) -> None:
    """Raise if any label lacks an entry in either color scale."""
    missing = sorted(
        {label.value for label in labels
         if label not in SHIFT_COLORS or label not in DETAILED_SHIFT_COLORS}
    )
    if missing:
        raise MalformedConfigError(f"No color defined for shift label(s): {', '.join(missing)}")


check_color_totality(ShiftLabel)


@dataclass(frozen=True)
class DisplayRules:
    """Calendar UI constants."""

    default_team: TeamId = TeamId.TEAM1
    date_format: str = "%Y-%m-%d"
    month_format: str = "%B %Y"

    # Team cards
    card_border_width: int = 4
    card_background_alpha: str = "10"  # Hex alpha suffix appended to the shift color
    rest_background: str = "#f5f5f5"
    rest_text_color: str = "#666"

    def card_background(self, shift: ShiftLabel) -> str:
        if shift is ShiftLabel.REST:
            return self.rest_background
        return f"{DETAILED_SHIFT_COLORS[shift]}{self.card_background_alpha}"

    def card_text_color(self, shift: ShiftLabel) -> str:
        if shift is ShiftLabel.REST:
            return self.rest_text_color
        return DETAILED_SHIFT_COLORS[shift]


RULES = DisplayRules()

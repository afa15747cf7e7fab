"""Tests for data models."""
import dataclasses
from datetime import date, datetime

import pytest

from shiftcal.models.config import ShiftCycleConfig, default_cycle_config
from shiftcal.models.dates import YearMonth, days_between, is_valid_date, to_date
from shiftcal.models.errors import InvalidDateError, MalformedConfigError, UnknownTeamError
from shiftcal.models.rules import (
    DETAILED_SHIFT_COLORS,
    RULES,
    SHIFT_COLORS,
    check_color_totality,
)
from shiftcal.models.shift import TEAM_ORDER, ShiftAssignment, ShiftLabel, TeamId


class TestShiftLabel:
    """Tests for ShiftLabel enum."""

    def test_values(self):
        assert ShiftLabel.REST.value == "rest"
        assert ShiftLabel.MORNING.value == "morning"
        assert ShiftLabel.DAY.value == "day"
        assert ShiftLabel.NIGHT.value == "night"

    def test_is_work(self):
        assert ShiftLabel.REST.is_work is False
        assert ShiftLabel.NIGHT.is_work is True

    def test_from_string(self):
        """Test parsing shifts from various string formats."""
        assert ShiftLabel.from_string("Morning") == ShiftLabel.MORNING
        assert ShiftLabel.from_string(" night ") == ShiftLabel.NIGHT

        # Original labels
        assert ShiftLabel.from_string("休") == ShiftLabel.REST
        assert ShiftLabel.from_string("早班") == ShiftLabel.MORNING
        assert ShiftLabel.from_string("白班") == ShiftLabel.DAY
        assert ShiftLabel.from_string("夜班") == ShiftLabel.NIGHT

    def test_from_string_rejects_unknown(self):
        with pytest.raises(ValueError):
            ShiftLabel.from_string("evening")


class TestTeamId:
    """Tests for TeamId enum."""

    def test_canonical_order(self):
        assert TEAM_ORDER == [TeamId.TEAM1, TeamId.TEAM2, TeamId.TEAM3, TeamId.TEAM4]
        assert TeamId.TEAM3.number == 3

    def test_from_string(self):
        assert TeamId.from_string("Team1") == TeamId.TEAM1
        assert TeamId.from_string("team 2") == TeamId.TEAM2
        assert TeamId.from_string("3") == TeamId.TEAM3
        assert TeamId.from_string("四队") == TeamId.TEAM4
        assert TeamId.from_string(TeamId.TEAM2) is TeamId.TEAM2

    def test_unknown_team(self):
        with pytest.raises(UnknownTeamError):
            TeamId.from_string("Team5")

    def test_assignment_to_dict(self):
        a = ShiftAssignment(team=TeamId.TEAM1, shift=ShiftLabel.REST)
        assert a.to_dict() == {"team": "Team1", "shift": "rest"}


class TestDates:
    """Tests for date normalization."""

    def test_to_date_accepts_date_datetime_and_iso(self):
        assert to_date(date(2025, 7, 15)) == date(2025, 7, 15)
        assert to_date(datetime(2025, 7, 15, 23, 59)) == date(2025, 7, 15)
        assert to_date("2025-07-15") == date(2025, 7, 15)
        assert to_date("2025-07-15T08:30:00") == date(2025, 7, 15)

    @pytest.mark.parametrize("value", ["invalid", "2025-02-30", "", None, 20250715, 3.5])
    def test_to_date_rejects(self, value):
        with pytest.raises(InvalidDateError):
            to_date(value)

    def test_is_valid_date(self):
        assert is_valid_date("2025-07-15") is True
        assert is_valid_date("invalid") is False

    def test_days_between_is_negative_before_base(self):
        assert days_between(date(2025, 7, 14), date(2025, 7, 15)) == -1
        assert days_between(date(2025, 7, 19), date(2025, 7, 15)) == 4


class TestYearMonth:
    """Tests for month arithmetic."""

    def test_of_and_str(self):
        assert YearMonth.of(date(2025, 7, 15)) == YearMonth(2025, 7)
        assert str(YearMonth(2025, 7)) == "2025-07"

    def test_parse(self):
        assert YearMonth.parse("2025-07") == YearMonth(2025, 7)
        assert YearMonth.parse("2025-07-15") == YearMonth(2025, 7)
        with pytest.raises(InvalidDateError):
            YearMonth.parse("2025-xx")
        with pytest.raises(InvalidDateError):
            YearMonth.parse("bad")

    def test_invalid_month(self):
        with pytest.raises(InvalidDateError):
            YearMonth(2025, 13)

    def test_shifted_across_years(self):
        assert YearMonth(2025, 12).shifted(1) == YearMonth(2026, 1)
        assert YearMonth(2025, 1).shifted(-1) == YearMonth(2024, 12)
        assert YearMonth(2025, 7).shifted(13) == YearMonth(2026, 8)
        assert YearMonth(2025, 7).shifted(-19) == YearMonth(2023, 12)

    def test_days_in_month(self):
        assert YearMonth(2025, 7).days_in_month == 31
        assert YearMonth(2025, 2).days_in_month == 28
        assert YearMonth(2024, 2).days_in_month == 29
        assert YearMonth(2025, 4).days_in_month == 30

    def test_dates(self):
        dates = YearMonth(2025, 2).dates()
        assert len(dates) == 28
        assert dates[0] == date(2025, 2, 1)
        assert dates[-1] == date(2025, 2, 28)


class TestShiftCycleConfig:
    """Tests for the cycle configuration."""

    def test_reference_config(self, default_config):
        assert default_config.base_date == date(2025, 7, 15)
        assert default_config.cycle_length == 4
        assert default_config.teams == TEAM_ORDER
        assert list(default_config.shift_table[TeamId.TEAM1]) == [
            ShiftLabel.REST, ShiftLabel.DAY, ShiftLabel.NIGHT, ShiftLabel.MORNING
        ]
        assert list(default_config.shift_table[TeamId.TEAM4]) == [
            ShiftLabel.NIGHT, ShiftLabel.MORNING, ShiftLabel.REST, ShiftLabel.DAY
        ]

    def test_is_immutable(self, default_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_config.cycle_length = 8
        with pytest.raises(TypeError):
            default_config.shift_table[TeamId.TEAM1] = ()

    def test_cycle_days_view_matches_table(self, default_config):
        days = default_config.cycle_days()
        assert len(days) == 4
        assert days[0] == {
            TeamId.TEAM1: ShiftLabel.REST,
            TeamId.TEAM2: ShiftLabel.MORNING,
            TeamId.TEAM3: ShiftLabel.DAY,
            TeamId.TEAM4: ShiftLabel.NIGHT,
        }
        for i, day in enumerate(days):
            for team, label in day.items():
                assert default_config.shift_table[team][i] == label

    def test_labels(self, default_config):
        assert default_config.labels() == list(ShiftLabel)

    def test_wrong_sequence_length(self, default_config):
        table = dict(default_config.shift_table)
        table[TeamId.TEAM2] = table[TeamId.TEAM2][:3]
        with pytest.raises(MalformedConfigError, match="Team2"):
            ShiftCycleConfig(base_date=date(2025, 7, 15), cycle_length=4, shift_table=table)

    def test_missing_team(self, default_config):
        table = dict(default_config.shift_table)
        del table[TeamId.TEAM3]
        with pytest.raises(MalformedConfigError, match="Team3"):
            ShiftCycleConfig(base_date=date(2025, 7, 15), cycle_length=4, shift_table=table)

    def test_unknown_team_in_table(self, default_config):
        table = {**default_config.shift_table, "Team9": ["rest"] * 4}
        with pytest.raises(MalformedConfigError):
            ShiftCycleConfig(base_date=date(2025, 7, 15), cycle_length=4, shift_table=table)

    @pytest.mark.parametrize("length", [0, -4, True, 4.0, "4"])
    def test_invalid_cycle_length(self, default_config, length):
        with pytest.raises(MalformedConfigError):
            ShiftCycleConfig(base_date=date(2025, 7, 15), cycle_length=length,
                             shift_table=default_config.shift_table)

    def test_invalid_base_date(self, default_config):
        with pytest.raises(MalformedConfigError):
            default_config.merged(base_date="not-a-date")

    def test_merged_returns_new_object(self, default_config):
        new = default_config.merged(base_date="2025-01-01")
        assert new is not default_config
        assert new.base_date == date(2025, 1, 1)
        assert default_config.base_date == date(2025, 7, 15)
        assert new.shift_table == default_config.shift_table

    def test_merged_repeats_sequences_for_multiple_length(self, default_config):
        new = default_config.merged({"cycleLength": 8})
        assert new.cycle_length == 8
        seq = default_config.shift_table[TeamId.TEAM1]
        assert new.shift_table[TeamId.TEAM1] == seq + seq

    def test_merged_rejects_non_multiple_length(self, default_config):
        with pytest.raises(MalformedConfigError):
            default_config.merged(cycle_length=3)

    def test_merged_rejects_unknown_field(self, default_config):
        with pytest.raises(MalformedConfigError, match="colour"):
            default_config.merged(colour="red")

    def test_dict_roundtrip(self, default_config):
        data = default_config.to_dict()
        assert data["base_date"] == "2025-07-15"
        assert data["shift_table"]["Team2"] == ["morning", "rest", "day", "night"]
        assert ShiftCycleConfig.from_dict(data) == default_config

    def test_from_dict_accepts_original_labels(self, default_config):
        restored = ShiftCycleConfig.from_dict({
            "baseDate": "2025-07-15",
            "cycleDays": 4,
            "shiftTable": {
                "一队": ["休", "白班", "夜班", "早班"],
                "二队": ["早班", "休", "白班", "夜班"],
                "三队": ["白班", "夜班", "早班", "休"],
                "四队": ["夜班", "早班", "休", "白班"],
            },
        })
        assert restored == default_config


class TestRules:
    """Tests for color tables and display rules."""

    def test_named_colors(self):
        assert SHIFT_COLORS == {
            ShiftLabel.MORNING: "blue",
            ShiftLabel.DAY: "green",
            ShiftLabel.NIGHT: "purple",
            ShiftLabel.REST: "gray",
        }

    def test_detailed_colors(self):
        assert DETAILED_SHIFT_COLORS == {
            ShiftLabel.MORNING: "#1890ff",
            ShiftLabel.DAY: "#52c41a",
            ShiftLabel.NIGHT: "#722ed1",
            ShiftLabel.REST: "#d9d9d9",
        }

    def test_totality(self):
        check_color_totality(ShiftLabel)
        check_color_totality(default_cycle_config().labels())

    def test_card_colors(self):
        assert RULES.card_background(ShiftLabel.REST) == "#f5f5f5"
        assert RULES.card_background(ShiftLabel.MORNING) == "#1890ff10"
        assert RULES.card_text_color(ShiftLabel.REST) == "#666"
        assert RULES.card_text_color(ShiftLabel.NIGHT) == "#722ed1"
        assert RULES.default_team == TeamId.TEAM1

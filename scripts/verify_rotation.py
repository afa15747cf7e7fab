"""
Verification Script for a Rotation Config
=========================================
Prints the day-of-cycle table and checks that every cycle day has each
working shift covered by exactly one team.

    python scripts/verify_rotation.py [config.json]
"""
import sys
from collections import Counter

from shiftcal.io.config_file import load_config
from shiftcal.models.config import default_cycle_config
from shiftcal.models.shift import ShiftLabel


def verify(config) -> int:
    problems = 0
    print(f"Base date {config.base_date}, cycle of {config.cycle_length} days")
    for i, day in enumerate(config.cycle_days()):
        row = ", ".join(f"{team.value}={label.value}" for team, label in day.items())
        print(f"  day {i + 1}: {row}")
        counts = Counter(day.values())
        for shift in ShiftLabel:
            if shift.is_work and counts[shift] != 1:
                print(f"    ✗ {shift.value} covered by {counts[shift]} team(s)")
                problems += 1
    print("OK" if problems == 0 else f"{problems} problem(s)")
    return problems


if __name__ == "__main__":
    cfg = load_config(sys.argv[1]) if len(sys.argv) > 1 else default_cycle_config()
    raise SystemExit(1 if verify(cfg) else 0)

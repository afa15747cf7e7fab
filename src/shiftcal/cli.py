from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.io.config_file import load_config, save_config
from shiftcal.io.month_export import export_month_to_csv, export_month_to_excel, month_table
from shiftcal.models.config import default_cycle_config
from shiftcal.models.dates import YearMonth, to_date
from shiftcal.models.errors import ShiftCalendarError
from shiftcal.models.rules import SHIFT_STYLES
from shiftcal.models.shift import TeamId
from shiftcal.utils.logging_setup import setup_logging
from shiftcal.utils.structured_logging import configure_structlog, get_structured_logger

log = get_structured_logger("shiftcal.cli")


def _build_calculator(args: argparse.Namespace) -> ShiftCalculator:
    if args.config:
        return ShiftCalculator(load_config(args.config))
    return ShiftCalculator()


def _cmd_day(args: argparse.Namespace) -> int:
    calc = _build_calculator(args)
    day = to_date(args.date) if args.date else date.today()
    shifts = calc.get_all_teams_shifts(day)
    if args.json_out:
        print(json.dumps({"date": day.isoformat(), "shifts": [a.to_dict() for a in shifts]}, indent=2))
    else:
        print(f"{day.isoformat()} (cycle day {calc.cycle_index(day) + 1}/{calc.config.cycle_length})")
        for a in shifts:
            print(f" - {a.team.value}: {SHIFT_STYLES[a.shift].display_name}")
    return 0


def _cmd_month(args: argparse.Namespace) -> int:
    calc = _build_calculator(args)
    month = YearMonth.parse(args.month) if args.month else YearMonth.of(date.today())
    df = month_table(calc, month)
    if args.team:
        team = TeamId.from_string(args.team)
        df = df[["date", "weekday", team.value]]
    if args.json_out:
        records = df.assign(date=df["date"].map(lambda d: d.isoformat())).to_dict("records")
        print(json.dumps({"month": str(month), "days": records}, ensure_ascii=False, indent=2))
    else:
        print(f"Month {month}:")
        print(df.to_string(index=False))
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    calc = _build_calculator(args)
    month = YearMonth.parse(args.month)
    output = Path(args.output)
    suffix = output.suffix.lower()
    if suffix == ".csv":
        export_month_to_csv(calc, month, output)
    elif suffix == ".xlsx":
        export_month_to_excel(calc, month, output, highlight_team=args.team)
    else:
        print(f"Unsupported export format: {output.suffix or '(none)'} (use .csv or .xlsx)", file=sys.stderr)
        return 2
    log.info("month_exported", month=str(month), path=str(output))
    print(f"Exported {month} to {output}")
    return 0


def _cmd_init_config(args: argparse.Namespace) -> int:
    path = save_config(default_cycle_config(), args.output)
    print(f"Wrote reference config to {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shiftcal", description="Four-team shift rotation calendar")
    p.add_argument("--config", help="JSON cycle config (default: reference rotation)")
    p.add_argument("--log-file", default=None, help="Write a rotating log file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    sub = p.add_subparsers(dest="command", required=True)

    p_day = sub.add_parser("day", help="All teams' shifts on one date")
    p_day.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p_day.add_argument("--json", dest="json_out", action="store_true", help="JSON output")
    p_day.set_defaults(func=_cmd_day)

    p_month = sub.add_parser("month", help="Rotation table for a month")
    p_month.add_argument("month", nargs="?", help="YYYY-MM (default: current month)")
    p_month.add_argument("--team", help="Only this team (Team1..Team4)")
    p_month.add_argument("--json", dest="json_out", action="store_true", help="JSON output")
    p_month.set_defaults(func=_cmd_month)

    p_export = sub.add_parser("export", help="Export a month to .csv or .xlsx")
    p_export.add_argument("month", help="YYYY-MM")
    p_export.add_argument("output", help="Output path (.csv or .xlsx)")
    p_export.add_argument("--team", help="Team column to highlight (xlsx)")
    p_export.set_defaults(func=_cmd_export)

    p_init = sub.add_parser("init-config", help="Write the reference config as JSON")
    p_init.add_argument("output", help="Output JSON path")
    p_init.set_defaults(func=_cmd_init_config)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.verbose > 1 else "INFO" if args.verbose else "WARNING"
    # Logs go to stderr so --json output stays parseable
    setup_logging(level=level, log_file=args.log_file)
    configure_structlog(level=getattr(logging, level), stream=sys.stderr)

    try:
        return args.func(args)
    except (ShiftCalendarError, OSError) as e:
        log.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

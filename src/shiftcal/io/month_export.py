"""
Month Table Export
==================
Builds the per-month rotation table (one row per date, one column per team)
and exports it to CSV or to a color-coded Excel workbook.
"""
import io
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from shiftcal.engine.calculator import ShiftCalculator
from shiftcal.models.dates import YearMonth
from shiftcal.models.rules import DETAILED_SHIFT_COLORS, SHIFT_STYLES
from shiftcal.models.shift import ShiftLabel, TeamId
from shiftcal.utils.logging_setup import get_logger

logger = get_logger("shiftcal.io.month_export")

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
HIGHLIGHT = Side(border_style="medium", color="1E90FF")


def month_table(calculator: ShiftCalculator, month) -> pd.DataFrame:
    """
    Rotation table for a month.

    Columns: ``date``, ``weekday``, then one column per team holding the
    shift label value (``rest``, ``morning`` ...).
    """
    month = YearMonth.coerce(month)
    rows = []
    for day, assignments in calculator.all_teams_between(month.first_day, month.last_day):
        row = {"date": day, "weekday": WEEKDAY_NAMES[day.weekday()]}
        for a in assignments:
            row[a.team.value] = a.shift.value
        rows.append(row)
    return pd.DataFrame(rows)


def shift_counts(table: pd.DataFrame) -> pd.DataFrame:
    """Count of each shift label per team (teams as rows, labels as columns)."""
    teams = [c for c in table.columns if c not in ("date", "weekday")]
    counts = {
        team: table[team].value_counts().reindex([s.value for s in ShiftLabel], fill_value=0)
        for team in teams
    }
    return pd.DataFrame(counts).T


def export_month_to_csv(
    calculator: ShiftCalculator,
    month,
    output: Union[str, Path, io.StringIO],
) -> None:
    """Write the month table as CSV (ISO dates)."""
    df = month_table(calculator, month)
    df["date"] = df["date"].map(lambda d: d.isoformat())
    df.to_csv(output, index=False)
    logger.info(f"Exported {len(df)} days to CSV")


def _fill(shift: ShiftLabel) -> PatternFill:
    color = DETAILED_SHIFT_COLORS[shift].lstrip("#").upper()
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def export_month_to_excel(
    calculator: ShiftCalculator,
    month,
    output: Union[str, Path, io.BytesIO],
    highlight_team: Optional[TeamId] = None,
) -> None:
    """
    Export a month to Excel.

    Sheets:
        1. Calendar - date x team grid, cells filled with the shift color
        2. Summary - shift counts per team
        3. Config - base date and cycle length used
    """
    month = YearMonth.coerce(month)
    highlight = TeamId.from_string(highlight_team) if highlight_team is not None else None
    df = month_table(calculator, month)
    teams = [c for c in df.columns if c not in ("date", "weekday")]

    wb = Workbook()

    # ========== Sheet 1: Calendar ==========
    ws = wb.active
    ws.title = "Calendar"
    headers = ["Date", "Weekday"] + teams
    for j, h in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=j, value=h)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")
    ws.freeze_panes = "C2"

    for r, values in enumerate(df.to_dict("records"), start=2):
        ws.cell(row=r, column=1, value=values["date"].isoformat())
        ws.cell(row=r, column=2, value=values["weekday"])
        for j, team in enumerate(teams, start=3):
            shift = ShiftLabel(values[team])
            cell = ws.cell(row=r, column=j, value=SHIFT_STYLES[shift].display_name)
            cell.fill = _fill(shift)
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = BORDER_THIN
            if highlight is not None and team == highlight.value:
                cell.border = Border(top=THIN, bottom=THIN, left=HIGHLIGHT, right=HIGHLIGHT)
                cell.font = Font(bold=True)

    for j in range(1, len(headers) + 1):
        ws.column_dimensions[get_column_letter(j)].width = 14

    # ========== Sheet 2: Summary ==========
    ws_sum = wb.create_sheet("Summary")
    counts = shift_counts(df)
    ws_sum.cell(row=1, column=1, value="Team").font = Font(bold=True)
    for j, label in enumerate(counts.columns, start=2):
        ws_sum.cell(row=1, column=j, value=SHIFT_STYLES[ShiftLabel(label)].display_name).font = Font(bold=True)
    for i, (team, row) in enumerate(counts.iterrows(), start=2):
        ws_sum.cell(row=i, column=1, value=team)
        for j, label in enumerate(counts.columns, start=2):
            ws_sum.cell(row=i, column=j, value=int(row[label]))

    # ========== Sheet 3: Config ==========
    ws_cfg = wb.create_sheet("Config")
    config = calculator.config
    for i, (key, val) in enumerate([
        ("Month", str(month)),
        ("Base date", config.base_date.isoformat()),
        ("Cycle length", config.cycle_length),
    ], start=1):
        ws_cfg.cell(row=i, column=1, value=key).font = Font(bold=True)
        ws_cfg.cell(row=i, column=2, value=val)

    wb.save(output)
    logger.info(f"Exported {month} ({len(df)} days) to Excel")

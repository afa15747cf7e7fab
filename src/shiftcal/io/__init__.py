# shiftcal/io - Config files and month exports
from .config_file import load_config, parse_config, save_config
from .month_export import export_month_to_csv, export_month_to_excel, month_table, shift_counts

__all__ = [
    "load_config", "parse_config", "save_config",
    "month_table", "shift_counts", "export_month_to_csv", "export_month_to_excel",
]

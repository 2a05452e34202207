"""File writers for CSV content."""

from .csv_writer import CSVWriter, escape_field, format_row, iter_csv_lines, to_csv, write_csv

__all__ = ["CSVWriter", "escape_field", "format_row", "iter_csv_lines", "to_csv", "write_csv"]

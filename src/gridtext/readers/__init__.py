"""File readers for CSV content."""

from .csv_reader import FIELD_PATTERN, CSVReader, parse_csv, read_csv

__all__ = ["CSVReader", "FIELD_PATTERN", "parse_csv", "read_csv"]

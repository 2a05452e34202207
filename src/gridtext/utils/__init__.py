"""Utility functions for GridText."""

from .excel_utils import column_index_from_letters, get_column_letter
from .logging_context import (
    FileContext,
    OperationContext,
    configure_logging,
    get_contextual_logger,
)

__all__ = [
    "get_column_letter",
    "column_index_from_letters",
    "get_contextual_logger",
    "configure_logging",
    "FileContext",
    "OperationContext",
]

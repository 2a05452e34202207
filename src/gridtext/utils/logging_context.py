"""Context-aware logging utilities for GridText."""

import contextvars
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import Config

# Context variables for tracking current processing context
current_file = contextvars.ContextVar[str | None]("current_file", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that automatically includes context information."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        """Add context information to log records."""
        file_path = current_file.get()
        operation = current_operation.get()

        extra = dict(kwargs.get("extra") or {})
        if file_path:
            extra["file"] = file_path
        if operation:
            extra["operation"] = operation
        kwargs = {**kwargs, "extra": extra}

        context_parts = []
        if file_path:
            context_parts.append(f"file={file_path}")
        if operation:
            context_parts.append(f"op={operation}")

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class FileContext:
    """Context manager for tracking the file being read or written."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.token = None

    def __enter__(self):
        self.token = current_file.set(self.file_path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            current_file.reset(self.token)


class OperationContext:
    """Context manager for tracking current operation."""

    def __init__(self, operation: str):
        self.operation = operation
        self.token = None

    def __enter__(self):
        self.token = current_operation.set(self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            current_operation.reset(self.token)


def configure_logging(config: "Config") -> None:
    """Set up logging from a ``Config``.

    Applies the level, format and optional log file. When the root logger has
    no handlers yet, the handler created here also shows the file/operation
    context. Handlers installed by the host application are left untouched.
    """
    level = logging.DEBUG if config.enable_debug else getattr(logging, config.log_level)
    root = logging.getLogger()
    had_handlers = bool(root.handlers)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=config.log_file,
    )
    logging.getLogger("gridtext").setLevel(level)

    if had_handlers:
        return

    formatter = logging.Formatter(
        LOG_FORMAT + " - %(file)s %(operation)s",
        defaults={"file": "", "operation": ""},
    )
    for handler in root.handlers:
        handler.setFormatter(formatter)

"""Utility functions for CLI operations."""

import logging

from pydantic import BaseModel

from ..errors import DecompressionError, FormatMismatchError, TruncatedInputError
from .schemas import ErrorResponse


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def print_json(model: BaseModel) -> None:
    print(model.model_dump_json(indent=2, exclude_none=True))


def error_code(exc: Exception) -> str:
    """Map an exception to the machine-readable code used in ErrorResponse."""
    if isinstance(exc, FileNotFoundError):
        return "not_found"
    if isinstance(exc, PermissionError):
        return "permission_denied"
    if isinstance(exc, FormatMismatchError):
        return "format_mismatch"
    if isinstance(exc, TruncatedInputError):
        return "truncated"
    if isinstance(exc, DecompressionError):
        return "decompression_failed"
    if isinstance(exc, ValueError):
        return "data_error"
    return "io_error"


def error_response(exc: Exception) -> ErrorResponse:
    return ErrorResponse(error=error_code(exc), message=str(exc))

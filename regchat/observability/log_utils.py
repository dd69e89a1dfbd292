"""
Logging utilities for safe structured logging.

Keeps prompts, answers and embedding vectors out of log lines in full:
vectors are reduced to their dimensionality, long text is truncated.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a short string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple)):
        if value and all(isinstance(item, float) for item in value):
            return f"vector({len(value)} dims)"
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({len(value)} keys)"
    else:
        val_str = str(value)

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value context rendered into the line and extra
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    rendered = " ".join(f"{key}={val}" for key, val in safe_context.items())
    logger.log(level, f"{message} {rendered}".rstrip(), extra={"context": safe_context})

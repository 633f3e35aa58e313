# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application logging.

``logger`` is the loguru proxy every module logs through; each record is
bound to the request's correlation id and passes the credential redaction
filter before reaching a sink. Call :func:`setup_logging` once at start.
"""

from .logger import ContextualLogger, setup_logging
from .logger import clear_correlation_id, get_correlation_id, set_correlation_id
from .logger import logger
from .sensitive_filter import sanitize_message, sanitize_record

__all__ = [
    "logger",
    "setup_logging",
    "ContextualLogger",
    # correlation id, set per request by the request logger middleware
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # redaction
    "sanitize_message",
    "sanitize_record",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Redaction of credentials before a log record reaches any sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"


def _assignment(key: str, value: str, flags: int = re.IGNORECASE) -> tuple[re.Pattern[str], str]:
    # key=value / key: "value"; group 2 is the secret part
    pattern = rf"({key}\s*[:=]\s*['\"]?)({value})(['\"]?)"
    return re.compile(pattern, flags), rf"\1{_MASK}\3"


SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    _assignment(r"secret[_-]?key", r"[A-Za-z0-9_\-]{8,}", flags=0),
    _assignment(r"login[_-]?token", r"[A-Za-z0-9_\-\.]{20,}"),
    _assignment(r"token", r"[A-Za-z0-9_\-\.]{20,}", flags=0),
    _assignment(r"cookie", r"[^'\"]{10,}"),
    _assignment(r"password", r"[^'\",}\s]+"),
    _assignment(r"pwd", r"[^'\",}\s]+"),
    (re.compile(r"(bearer\s+)[A-Za-z0-9_\-\.]{20,}", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"]{10,}", re.IGNORECASE), rf"\1{_MASK}"),
    # user:password@host in database URLs
    (
        re.compile(r"\b(postgresql|postgres|mysql|mariadb|mssql)(\+\w+)?://([^:/@\s]+):([^@\s]+)@"),
        rf"\1\2://\3:{_MASK}@",
    ),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: rewrite the message in place, never drop the record."""

    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True

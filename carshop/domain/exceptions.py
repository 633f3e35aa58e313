# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any


class InvariantViolationError(ValueError):
    """An entity was built with a value its own rules forbid."""

    def __init__(self, rule: str, *, field: str, value: Any = None) -> None:
        self.rule = rule
        self.field = field
        self.value = value
        super().__init__(f"{field} {rule} (got {value!r})")


InvariantViolation = InvariantViolationError

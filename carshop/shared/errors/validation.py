# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    """Loggable summary of a pydantic failure; raw input values are left out."""

    errors = []
    for error in exc.errors(include_url=False, include_input=False):
        entry: dict[str, Any] = {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "type": error["type"],
        }
        if "ctx" in error:
            entry["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
        errors.append(entry)

    return {"fields": sorted({entry["field"] for entry in errors}), "errors": errors}


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(context=format_pydantic_errors(exc)) from exc


def validate_payload(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
    "validate_payload",
]

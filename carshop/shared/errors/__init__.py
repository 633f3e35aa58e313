from .base import AppError, DomainError, InfrastructureError, UnauthorizedError, ValidationError
from .http import failure_response, handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "UnauthorizedError",
    "ValidationError",
    "failure_response",
    "handle_app_error",
    "register_error_handler",
]

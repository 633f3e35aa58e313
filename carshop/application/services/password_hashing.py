"""Salted password hashes for stored users."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from carshop.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Hash with werkzeug's ``method$salt$hash`` format.

    ``method`` accepts anything :func:`generate_password_hash` does, e.g.
    ``"scrypt"`` or ``"pbkdf2:sha256:600000"``.
    """

    def __init__(self, method: str = "scrypt", salt_length: int = 16) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, hashed: str) -> bool:
        # rows without a usable hash can never authenticate
        if not hashed or hashed.count("$") < 2:
            return False
        return check_password_hash(hashed, password)

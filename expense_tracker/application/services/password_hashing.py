"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from expense_tracker.domain.users.repositories import PasswordHasher


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted scrypt/pbkdf2 hashes in werkzeug's ``method$salt$hash`` format."""

    def hash(self, password: str) -> str:
        return str(generate_password_hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        return bool(check_password_hash(hashed, password))

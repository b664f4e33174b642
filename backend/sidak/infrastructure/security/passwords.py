"""Salted SHA-256 password hashing, compatible with existing user records.

The digest is ``sha256(f"{salt}|{password}")`` in lower-case hex, which is
how accounts migrated from the old user sheet were stored.
"""

import hashlib
import hmac
import uuid


def generate_salt() -> str:
    return str(uuid.uuid4())


def hash_password(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}|{password}".encode("utf-8")).hexdigest()


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    if not salt or not password_hash:
        return False
    return hmac.compare_digest(hash_password(password, salt), password_hash)

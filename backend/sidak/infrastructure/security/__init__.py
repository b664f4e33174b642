from .passwords import generate_salt, hash_password, verify_password
from .tokens import TokenSigner

__all__ = [
    "generate_salt",
    "hash_password",
    "verify_password",
    "TokenSigner",
]

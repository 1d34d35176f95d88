"""Hashing for key mixing and OS seed material."""

import hashlib
import secrets

__all__ = [
    "DIGEST_SIZE",
    "Sha256d",
    "generate_seed_material",
]

DIGEST_SIZE = hashlib.sha256().digest_size


class Sha256d:
    """SHA-256 applied twice, with the incremental interface of hashlib.

    The outer hash hides the inner state, so the result cannot be extended
    by appending data to a known digest.
    """

    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes = b""):
        self._inner = hashlib.sha256(data)

    def update(self, data: bytes) -> None:
        self._inner.update(data)

    def digest(self) -> bytes:
        return hashlib.sha256(self._inner.digest()).digest()

    def hexdigest(self) -> str:
        return self.digest().hex()


def generate_seed_material(nbytes: int = 32) -> bytes:
    """Fresh seed bytes from the operating system."""
    assert nbytes > 0, "Seed material must not be empty"
    return secrets.token_bytes(nbytes)

"""Block cipher factories for the generator.

A factory takes a key and returns an object that encrypts single blocks.
The ones here wrap algorithms from `cryptography` in ECB mode, which applied
to one block at a time is the bare block permutation.
"""

from collections.abc import Callable
from typing import Any, Protocol

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.decrepit.ciphers.algorithms import Camellia
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "CIPHERS",
    "BlockCipher",
    "CipherFactory",
    "EcbBlockCipher",
    "aes",
    "camellia",
    "cipher",
    "sm4",
]


class BlockCipher(Protocol):
    block_size: int

    def encrypt(self, block: bytes) -> bytes: ...


CipherFactory = Callable[[bytes], BlockCipher]


def _process_key(key: bytes | Any) -> bytes:
    key = memoryview(key)
    if key.nbytes == 0:
        raise ValueError("key must not be empty")
    return key.tobytes()


class EcbBlockCipher:
    def __init__(self, algorithm):
        """Wrap a `cryptography` block algorithm that already holds its key."""
        self.block_size = algorithm.block_size // 8
        try:
            self._enc = Cipher(algorithm, modes.ECB()).encryptor()
        except UnsupportedAlgorithm as e:
            raise ValueError(f"{algorithm.name} is not supported by this OpenSSL build") from e

    def encrypt(self, block: bytes | Any) -> bytes:
        """Encrypt exactly one block"""
        if len(block) != self.block_size:
            raise ValueError(f"block must be {self.block_size} bytes, got {len(block)}")
        return self._enc.update(block)


def aes(key: bytes | Any) -> EcbBlockCipher:
    """AES with a 16, 24 or 32 byte key (AES-256 for generator keys)."""
    return EcbBlockCipher(algorithms.AES(_process_key(key)))


def camellia(key: bytes | Any) -> EcbBlockCipher:
    """Camellia with a 16, 24 or 32 byte key."""
    return EcbBlockCipher(Camellia(_process_key(key)))


def sm4(key: bytes | Any) -> EcbBlockCipher:
    """SM4, which only takes 16 byte keys and so cannot hold a generator key."""
    return EcbBlockCipher(algorithms.SM4(_process_key(key)))


CIPHERS: dict[str, CipherFactory] = {
    "AES": aes,
    "CAMELLIA": camellia,
    "SM4": sm4,
}


def cipher(name: str) -> CipherFactory:
    """Look up a cipher factory by name (case insensitive)."""
    try:
        return CIPHERS[name.strip().upper()]
    except KeyError:
        known = ", ".join(sorted(CIPHERS))
        raise ValueError(f"Unknown cipher {name!r}, choose one of: {known}") from None

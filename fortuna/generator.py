"""Fortuna generator: a block cipher in counter mode that keeps replacing its key."""

import logging
import operator
from typing import Any

from fortuna.ciphers import BlockCipher, CipherFactory, aes
from fortuna.crypto import DIGEST_SIZE, Sha256d
from fortuna.errors import CipherInitError, UnseededError

__all__ = [
    "MAX_BLOCKS",
    "Generator",
]

logger = logging.getLogger("fortuna.generator")

# Blocks produced under one key before it is replaced
MAX_BLOCKS = 1 << 16

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def _wipe(buf: bytearray):
    """Overwrite a buffer with zeroes in place."""
    buf[:] = bytes(len(buf))


class Generator:
    """State of one instance of the Fortuna pseudo-random generator.

    The generator must be seeded with `reseed()` or `seed()` before use.
    Randomness is then extracted with `pseudo_random_data()`, or `int63()`
    for integers. After every request, and after every `MAX_BLOCKS` blocks
    within a request, the key is replaced by fresh generator output so that
    a later compromise does not reveal earlier output.

    Not safe for concurrent use. Callers sharing one generator between
    threads must serialise access, e.g. with a `threading.Lock`.
    """

    def __init__(self, cipher_factory: CipherFactory = aes):
        """Construct an unseeded generator.

        `cipher_factory` takes a key and returns a block cipher, see
        `fortuna.ciphers`. It must accept keys of `DIGEST_SIZE` bytes.
        """
        self._cipher_factory = cipher_factory
        self._key = bytearray(DIGEST_SIZE)
        self._cipher = self._new_cipher(self._key)
        block_size = getattr(self._cipher, "block_size", 0)
        if not isinstance(block_size, int) or block_size < 1:
            raise CipherInitError(f"cipher reports an invalid block size: {block_size!r}")
        # Little-endian block counter; all zero until the first reseed
        self._counter = bytearray(block_size)

    def __repr__(self):
        state = "seeded" if self.seeded else "unseeded"
        return f"<{type(self).__name__} {state}, {self.block_size} byte blocks>"

    @property
    def block_size(self) -> int:
        return len(self._counter)

    @property
    def key_size(self) -> int:
        return len(self._key)

    @property
    def seeded(self) -> bool:
        return any(self._counter)

    def _new_cipher(self, key: bytearray) -> BlockCipher:
        try:
            return self._cipher_factory(bytes(key))
        except (ValueError, TypeError) as e:
            raise CipherInitError(
                f"Cipher factory rejected a {len(key)} byte key: {e}"
            ) from e

    def _set_key(self, key: bytearray):
        """Install a new key together with its cipher, wiping the old key."""
        cipher = self._new_cipher(key)
        assert cipher.block_size == len(self._counter), "Block size changed with the key"
        _wipe(self._key)
        self._key = key
        self._cipher = cipher

    def _inc(self):
        # The counter is stored least-significant byte first
        for i in range(len(self._counter)):
            self._counter[i] = (self._counter[i] + 1) & 0xFF
            if self._counter[i]:
                break

    def reseed(self, seed: bytes | Any):
        """Mix seed material into the key.

        The new key is SHA-256d of the old key followed by the seed, so
        knowing the state after a reseed does not reveal the state before.
        """
        logger.debug("setting the PRNG seed")
        self._mix(self._key, seed)

    def _mix(self, old_key: bytes | Any, seed: bytes | Any):
        h = Sha256d()
        h.update(old_key)
        h.update(seed)
        self._set_key(bytearray(h.digest()))
        self._inc()

    def _num_blocks(self, n: int) -> int:
        k = len(self._counter)
        return (n + k - 1) // k

    def _generate_blocks(self, out: bytearray, k: int) -> bytearray:
        """Append k blocks of cipher output to out."""
        if not self.seeded:
            raise UnseededError()
        for _ in range(k):
            out += self._cipher.encrypt(bytes(self._counter))
            self._inc()
        return out

    def _rekey(self):
        key_size = len(self._key)
        buf = self._generate_blocks(bytearray(), self._num_blocks(key_size))
        new_key = buf[:key_size]
        _wipe(buf)
        self._set_key(new_key)
        logger.debug("generator rekeyed")

    def pseudo_random_data(self, n: int) -> bytes:
        """Return n pseudo-random bytes.

        The result can be used as a replacement for a sequence of uniformly
        distributed and independent bytes.
        """
        if n < 0:
            raise ValueError(f"Cannot generate a negative number of bytes: {n}")
        if not self.seeded:
            raise UnseededError()

        num_blocks = self._num_blocks(n)
        res = bytearray()
        while num_blocks > 0:
            count = min(num_blocks, MAX_BLOCKS)
            self._generate_blocks(res, count)
            num_blocks -= count
            self._rekey()

        logger.debug("generated %d pseudo-random bytes", n)
        out = bytes(res[:n])
        _wipe(res)
        return out

    def int63(self) -> int:
        """Uniformly distributed integer in 0 ... 2**63 - 1."""
        data = bytearray(self.pseudo_random_data(8))
        data[0] &= 0x7F
        return int.from_bytes(data, "big")

    def seed(self, x: int):
        """Set a new state from a signed 64-bit integer.

        Unlike `reseed()` this discards the previous key, so the output that
        follows only depends on x and on the number of blocks produced
        before. Use it on a fresh generator for reproducible streams.
        """
        x = operator.index(x)
        if not INT64_MIN <= x <= INT64_MAX:
            raise ValueError(f"Seed must fit in a signed 64-bit integer: {x}")
        data = x.to_bytes(8, "big", signed=True)
        logger.debug("setting the PRNG seed from an integer")
        self._mix(bytes(len(self._key)), data)

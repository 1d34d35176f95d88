"""Standard library `random.Random` interface on top of a Fortuna generator."""

import random

from fortuna.ciphers import CipherFactory, aes
from fortuna.crypto import generate_seed_material
from fortuna.generator import Generator

__all__ = ["FortunaRandom"]


class FortunaRandom(random.Random):
    """`random.Random` drawing all of its bits from a Fortuna generator.

    With no seed the generator is seeded from OS entropy. An integer seed
    gives a reproducible stream, as does a str or bytes seed.
    """

    def __init__(self, x=None, cipher_factory: CipherFactory = aes):
        self._cipher_factory = cipher_factory
        super().__init__(x)

    def seed(self, a=None, version=2):
        # A fresh generator, so that the stream only depends on the seed
        gen = Generator(self._cipher_factory)
        if a is None:
            gen.reseed(generate_seed_material())
        elif isinstance(a, int):
            gen.seed(a)
        elif isinstance(a, (str, bytes, bytearray)):
            if isinstance(a, str):
                a = a.encode()
            gen.seed(0)
            gen.reseed(a)
        else:
            raise TypeError(
                f"The only supported seed types are: None, int, str, bytes, and bytearray, not {type(a).__name__}"
            )
        self.generator = gen
        self.gauss_next = None

    def int63(self) -> int:
        return self.generator.int63()

    def random(self) -> float:
        """Float in [0.0, 1.0) with 53 random bits."""
        return (self.generator.int63() >> 10) * 2.0**-53

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        if k == 0:
            return 0
        nbytes = (k + 7) // 8
        x = int.from_bytes(self.generator.pseudo_random_data(nbytes), "big")
        return x >> (nbytes * 8 - k)

    def randbytes(self, n: int) -> bytes:
        return self.generator.pseudo_random_data(n)

    def getstate(self):
        raise NotImplementedError("Generator state is secret and cannot be saved")

    def setstate(self, state):
        raise NotImplementedError("Generator state is secret and cannot be restored")

import numpy as np

from fortuna.generator import Generator


class FortunaBits:
    """Fill numpy arrays from a seeded generator.

    This is not an `np.random.BitGenerator`: numpy only drives bit
    generators through a C capsule, which a pure Python class cannot
    provide, so `np.random.Generator(FortunaBits(...))` does not work.
    Draw words and floats through the methods here instead.
    """

    def __init__(self, generator: Generator):
        self._generator = generator

    def _words(self, count: int) -> np.ndarray:
        data = self._generator.pseudo_random_data(8 * count)
        return np.frombuffer(data, dtype="<u8").astype(np.uint64)

    def random_raw(self, size=None):
        """Raw 64-bit words, a Python int when size is None"""
        if size is None:
            return int(self._words(1)[0])
        return self._words(int(np.prod(size))).reshape(size)

    def int63(self, size=None):
        if size is None:
            return self._generator.int63()
        words = self._words(int(np.prod(size))) & np.uint64(0x7FFF_FFFF_FFFF_FFFF)
        return words.astype(np.int64).reshape(size)

    def random(self, size=None):
        """Doubles in [0, 1) from the top 53 bits of each word"""
        if size is None:
            return (self.random_raw() >> 11) * 2.0**-53
        words = self._words(int(np.prod(size))) >> np.uint64(11)
        return (words.astype(np.float64) * 2.0**-53).reshape(size)

import numpy as np

from fortuna.generator import Generator
from fortuna.nprand import FortunaBits


def seeded(seed=11):
    gen = Generator()
    gen.seed(seed)
    return gen


def test_random_raw_matches_bytes():
    bits = FortunaBits(seeded())
    words = bits.random_raw(6)
    assert words.dtype == np.uint64
    assert words.shape == (6,)
    data = seeded().pseudo_random_data(48)
    assert [int(w) for w in words] == [
        int.from_bytes(data[i : i + 8], "little") for i in range(0, 48, 8)
    ]


def test_random_raw_scalar():
    x = FortunaBits(seeded()).random_raw()
    assert isinstance(x, int)
    assert x == int.from_bytes(seeded().pseudo_random_data(8), "little")


def test_int63():
    bits = FortunaBits(seeded())
    values = bits.int63((4, 25))
    assert values.shape == (4, 25)
    assert values.dtype == np.int64
    assert (values >= 0).all()
    assert 0 <= bits.int63() < 2**63


def test_random_floats():
    bits = FortunaBits(seeded())
    values = bits.random(1000)
    assert values.dtype == np.float64
    assert ((values >= 0.0) & (values < 1.0)).all()
    assert 0.0 <= bits.random() < 1.0

"""Fortuna - cryptographic pseudo-random generator.

A block cipher in counter mode whose key is replaced by its own output after
every request, so that compromising the current state does not reveal
previously generated data.
"""

from fortuna.ciphers import CIPHERS, BlockCipher, CipherFactory, aes, camellia, cipher
from fortuna.crypto import Sha256d, generate_seed_material
from fortuna.errors import CipherInitError, ErrorKind, GeneratorError, UnseededError
from fortuna.generator import MAX_BLOCKS, Generator
from fortuna.source import FortunaRandom

try:
    from fortuna._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    "CIPHERS",
    "MAX_BLOCKS",
    "BlockCipher",
    "CipherFactory",
    "CipherInitError",
    "ErrorKind",
    "FortunaRandom",
    "Generator",
    "GeneratorError",
    "Sha256d",
    "UnseededError",
    "__version__",
    "aes",
    "camellia",
    "cipher",
    "generate_seed_material",
]

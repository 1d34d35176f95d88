"""Errors raised by the generator when it cannot give any security guarantee."""

import enum

__all__ = [
    "CipherInitError",
    "ErrorKind",
    "GeneratorError",
    "UnseededError",
]


class ErrorKind(enum.Enum):
    UNSEEDED = "unseeded"
    CIPHER_INIT_FAILED = "cipher-init-failed"


class GeneratorError(RuntimeError):
    """Base class for generator misuse and misconfiguration."""

    kind: ErrorKind


class UnseededError(GeneratorError):
    """Output was requested before the generator was ever seeded."""

    kind = ErrorKind.UNSEEDED

    def __init__(self, msg: str = "generator not yet seeded"):
        super().__init__(msg)


class CipherInitError(GeneratorError):
    """The cipher factory rejected a key."""

    kind = ErrorKind.CIPHER_INIT_FAILED
